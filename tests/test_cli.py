import pytest
from loguru import logger

from threatrank import config
from threatrank.cli import EXIT_ERROR, EXIT_NO_CONTACTS, EXIT_OK, main

SAMPLE = """\
# test feed
id,iff,range_km,closing_mps,altitude_m,rcs_m2
A1,Friend,10,50,1000,5
B2,Foe,10,150,500,20
Z9,Foe,1,2
Q7,xyz,10,150,500,20
C3,Hostile,2,400,100,100
"""


@pytest.fixture(autouse=True)
def _reset_loguru():
    yield
    # main() points loguru at the captured stderr; drop it after each test
    logger.remove()


def _write(tmp_path, text, name="contacts.csv"):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def test_main_prints_ranked_table(tmp_path, capsys):
    path = _write(tmp_path, SAMPLE)
    assert main([str(path)]) == EXIT_OK

    out = capsys.readouterr().out.splitlines()
    assert out[0].startswith("RANK")
    assert out[2].split()[1] == "C3"
    assert out[2].rstrip().endswith("INTERCEPT")
    assert len(out) == 2 + 3


def test_main_reports_discarded_rows(tmp_path, capsys):
    path = _write(tmp_path, SAMPLE)
    assert main([str(path)]) == EXIT_OK
    err = capsys.readouterr().err
    assert "Z9,Foe,1,2" in err
    assert "Q7,xyz,10,150,500,20" in err


def test_main_missing_file_exits_2(tmp_path, capsys):
    assert main([str(tmp_path / "missing.csv")]) == EXIT_ERROR
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Failed to open" in captured.err


def test_main_no_usable_rows_exits_1(tmp_path, capsys):
    path = _write(tmp_path, "# nothing here\nid,iff,range_km,closing_mps,altitude_m,rcs_m2\nbad,row\n")
    assert main([str(path)]) == EXIT_NO_CONTACTS
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "No contacts loaded" in captured.err


def test_main_uses_default_path(tmp_path, monkeypatch, capsys):
    (tmp_path / "data").mkdir()
    _write(tmp_path / "data", SAMPLE)
    monkeypatch.chdir(tmp_path)
    assert main([]) == EXIT_OK
    assert "B2" in capsys.readouterr().out


def test_main_is_idempotent(tmp_path, capsys):
    path = _write(tmp_path, SAMPLE)
    main([str(path)])
    first = capsys.readouterr().out
    main([str(path)])
    second = capsys.readouterr().out
    assert first == second


def test_main_writes_csv(tmp_path, capsys):
    path = _write(tmp_path, SAMPLE)
    out = tmp_path / "ranking.csv"
    assert main([str(path), "--csv-out", str(out)]) == EXIT_OK
    assert out.exists()
    assert out.read_text(encoding="utf-8").splitlines()[0].startswith("rank,id,iff")


def test_main_invalid_env_log_level_exits_2(tmp_path, monkeypatch, capsys):
    path = _write(tmp_path, SAMPLE)
    monkeypatch.setattr(config, "LOG_LEVEL", "WARN")
    assert main([str(path)]) == EXIT_ERROR
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Invalid log level" in captured.err


def test_row_diagnostics_survive_quiet_log_level(tmp_path, capsys):
    path = _write(tmp_path, SAMPLE)
    assert main([str(path), "--log-level", "critical"]) == EXIT_OK
    err = capsys.readouterr().err
    assert "Z9,Foe,1,2" in err
    assert "Q7,xyz,10,150,500,20" in err
    # info-level progress stays hidden
    assert "Parsed" not in err


def test_quiet_log_level_still_reports_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.csv"), "--log-level", "CRITICAL"]) == EXIT_ERROR
    assert "Failed to open" in capsys.readouterr().err
