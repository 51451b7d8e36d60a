import pytest

from kongclimb.board import Board
from kongclimb.records import Steps
from kongclimb.replay import PASSED, ReplayGame

LEVEL = "\n".join(["L", "", "", " &   @  $", "=========="])
STEPS = "0\n1\n1 d"
WIN = "1\n3 1\n100"


def _write(directory, name, text):
    (directory / name).write_text(text, encoding="latin-1")


@pytest.fixture
def stage(tmp_path):
    _write(tmp_path, "dkong_01.screen", LEVEL)
    _write(tmp_path, "dkong_01.steps", STEPS)
    _write(tmp_path, "dkong_01.result", WIN)
    return tmp_path


def _replay(directory):
    return ReplayGame(True, Board(directory))


def test_recorded_win_passes(stage, capsys):
    game = _replay(stage)
    assert game.run() is True
    assert PASSED in capsys.readouterr().out
    assert game.board.silent is True


def test_start_runs_the_replay(stage, capsys):
    assert _replay(stage).start() is True
    assert PASSED in capsys.readouterr().out


def test_wrong_score_fails(stage, capsys):
    _write(stage, "dkong_01.result", "1\n3 1\n0")
    assert _replay(stage).run() is False
    out = capsys.readouterr().out
    assert "The score is different" in out
    assert PASSED not in out


def test_wrong_iteration_fails(stage, capsys):
    _write(stage, "dkong_01.result", "1\n4 1\n100")
    assert _replay(stage).run() is False
    assert "TEST FAILED" in capsys.readouterr().out


def test_wrong_result_value_fails(stage, capsys):
    _write(stage, "dkong_01.result", "1\n3 0\n100")
    assert _replay(stage).run() is False
    assert "the expected result says Mario Dead" in capsys.readouterr().out


def test_extra_expected_result_fails(stage, capsys):
    _write(stage, "dkong_01.result", "2\n3 1\n9 1\n100")
    assert _replay(stage).run() is False
    assert "less results" in capsys.readouterr().out


def test_missing_result_file_fails(stage, capsys):
    (stage / "dkong_01.result").unlink()
    assert _replay(stage).run() is False
    assert "There is not result file for: dkong_01.screen" in capsys.readouterr().out


def test_missing_steps_file_fails(stage, capsys):
    (stage / "dkong_01.steps").unlink()
    assert _replay(stage).run() is False
    assert "There is not steps file for: dkong_01.screen" in capsys.readouterr().out


def test_no_levels_fails(tmp_path, capsys):
    assert _replay(tmp_path).run() is False
    assert PASSED not in capsys.readouterr().out


def test_only_invalid_levels_fail(tmp_path):
    _write(tmp_path, "dkong_01.screen", "==========")
    assert _replay(tmp_path).run() is False


def test_two_levels_in_a_row_pass(stage, capsys):
    _write(stage, "dkong_02.screen", LEVEL)
    _write(stage, "dkong_02.steps", STEPS)
    _write(stage, "dkong_02.result", "1\n3 1\n200")
    game = _replay(stage)
    assert game.run() is True
    assert game.score == 200
    assert capsys.readouterr().out.count(PASSED) == 1


def test_keys_for_reads_the_step_of_its_iteration(tmp_path):
    game = _replay(tmp_path)
    steps = Steps()
    steps.add(2, "dp")
    assert game.keys_for(1, steps) == ("", "")
    assert game.keys_for(2, steps) == ("d", "p")
    assert len(steps) == 0


def test_keys_for_single_key_step(tmp_path):
    game = _replay(tmp_path)
    steps = Steps()
    steps.add(5, "w")
    assert game.keys_for(5, steps) == ("w", "")


def test_recording_file_names_follow_the_level(stage):
    game = _replay(stage)
    assert game.steps_file_name() == "dkong_01.steps"
    assert game.result_file_name() == "dkong_01.result"