from kongclimb.cli import main
from kongclimb.replay import PASSED

LEVEL = "\n".join(["L", "", "", " &   @  $", "=========="])


def _write(directory, name, text):
    (directory / name).write_text(text, encoding="latin-1")


def _stage(directory, score):
    _write(directory, "dkong_01.screen", LEVEL)
    _write(directory, "dkong_01.steps", "0\n1\n1 d")
    _write(directory, "dkong_01.result", f"1\n3 1\n{score}")


def test_silent_load_replays_levels_in_current_directory(tmp_path, monkeypatch, capsys):
    _stage(tmp_path, 100)
    monkeypatch.chdir(tmp_path)
    assert main(["-load", "-silent"]) == 0
    assert PASSED in capsys.readouterr().out


def test_silent_load_reports_a_failed_check(tmp_path, monkeypatch, capsys):
    _stage(tmp_path, 0)
    monkeypatch.chdir(tmp_path)
    assert main(["-load", "-silent"]) == 0
    out = capsys.readouterr().out
    assert "The score is different" in out
    assert PASSED not in out


def test_silent_load_without_levels_prints_nothing_passed(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main(["-load", "-silent"]) == 0
    assert PASSED not in capsys.readouterr().out