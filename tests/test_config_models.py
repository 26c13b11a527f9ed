from threatrank.config import DEFAULT_WEIGHTS, ScoreWeights
from threatrank.pipeline_types import IFF, Suggestion


def test_default_weights_values():
    w = ScoreWeights()
    assert w == DEFAULT_WEIGHTS
    assert w.w_range_inv == 60.0
    assert w.w_closing == 0.25
    assert w.w_rcs == 0.4
    assert w.w_alt_low == 0.004
    assert (w.w_iff_friend, w.w_iff_foe, w.w_iff_unknown) == (-40.0, 30.0, 15.0)


def test_weights_accept_alternate_profile():
    w = ScoreWeights(w_iff_foe=50.0)
    assert w.w_iff_foe == 50.0
    assert w.w_range_inv == DEFAULT_WEIGHTS.w_range_inv


def test_display_labels():
    assert [i.label for i in IFF] == ["FRIEND", "FOE", "UNKNOWN"]
    assert Suggestion.IGNORE_FRIEND.label == "IGNORE (FRIEND)"
    assert Suggestion.ELEVATED_MONITOR.label == "ELEVATED MONITOR"
