import pytest

from kongclimb.records import Results, ResultValue, Steps


def test_steps_round_trip(tmp_path):
    steps = Steps(random_seed=123456789)
    steps.add(3, "dp")
    steps.add(10, "w")
    path = tmp_path / "dkong_a.steps"
    steps.save(path)
    loaded = Steps.load(path)
    assert loaded.random_seed == 123456789
    assert list(loaded) == [(3, "dp"), (10, "w")]


def test_steps_file_layout(tmp_path):
    steps = Steps(random_seed=7)
    steps.add(3, "d")
    path = tmp_path / "a.steps"
    steps.save(path)
    assert path.read_text() == "7\n1\n3 d"


def test_steps_load_stops_at_count(tmp_path):
    path = tmp_path / "a.steps"
    path.write_text("5\n1\n2 a\n4 d\n")
    loaded = Steps.load(path)
    assert list(loaded) == [(2, "a")]


def test_steps_queue_behaviour():
    steps = Steps()
    steps.add(2, "a")
    steps.add(5, "d")
    assert steps.is_next_on(2) is True
    assert steps.is_next_on(5) is False
    assert steps.pop() == "a"
    assert steps.is_next_on(5) is True
    steps.clear()
    assert len(steps) == 0
    assert steps.is_next_on(5) is False
    with pytest.raises(IndexError):
        steps.pop()


def test_steps_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        Steps.load(tmp_path / "none.steps")


def test_steps_empty_file(tmp_path):
    path = tmp_path / "a.steps"
    path.write_text("")
    with pytest.raises(ValueError):
        Steps.load(path)


def test_results_round_trip(tmp_path):
    results = Results()
    results.add(40, ResultValue.MARIO_DEAD)
    results.add(90, ResultValue.FINISHED)
    path = tmp_path / "a.result"
    results.save(path, 50)
    loaded, score = Results.load(path)
    assert score == 50
    assert list(loaded) == [(40, ResultValue.MARIO_DEAD), (90, ResultValue.FINISHED)]


def test_results_file_layout(tmp_path):
    results = Results()
    results.add(12, ResultValue.FINISHED)
    path = tmp_path / "a.result"
    results.save(path, 100)
    assert path.read_text() == "1\n12 1\n100"


def test_results_missing_score(tmp_path):
    path = tmp_path / "a.result"
    path.write_text("1\n12 1\n")
    with pytest.raises(ValueError):
        Results.load(path)


def test_results_pop_on_empty():
    results = Results()
    assert results.pop() == (0, ResultValue.NO_RESULT)
    results.add(4, ResultValue.FINISHED)
    assert results.pop() == (4, ResultValue.FINISHED)


def test_mismatches_equal_results_consume_own_list():
    mine, truth = Results(), Results()
    for results in (mine, truth):
        results.add(8, ResultValue.MARIO_DEAD)
        results.add(30, ResultValue.FINISHED)
    assert mine.mismatches(truth) == []
    assert len(mine) == 0
    assert len(truth) == 2


def test_mismatches_iteration_difference():
    mine, truth = Results(), Results()
    mine.add(8, ResultValue.MARIO_DEAD)
    truth.add(9, ResultValue.MARIO_DEAD)
    problems = mine.mismatches(truth)
    assert len(problems) == 1
    assert problems[0].startswith("TEST FAILED - the result in actual game was in 8 iteration")


def test_mismatches_value_difference():
    mine, truth = Results(), Results()
    mine.add(8, ResultValue.MARIO_DEAD)
    truth.add(8, ResultValue.FINISHED)
    (problem,) = mine.mismatches(truth)
    assert "the actual game says Mario Dead" in problem
    assert "expected result says finished" in problem


def test_mismatches_invalid_expected_value(tmp_path):
    path = tmp_path / "a.result"
    path.write_text("1\n8 7\n0")
    truth, _ = Results.load(path)
    mine = Results()
    mine.add(8, ResultValue.FINISHED)
    (problem,) = mine.mismatches(truth)
    assert "invalid value" in problem


def test_mismatches_count_differences():
    longer, shorter = Results(), Results()
    longer.add(1, ResultValue.MARIO_DEAD)
    longer.add(2, ResultValue.MARIO_DEAD)
    shorter.add(1, ResultValue.MARIO_DEAD)
    assert longer.mismatches(shorter) == [
        "TEST FAILED - the actual game result has more results than the expected game result"
    ]
    fewer = Results()
    fewer.add(1, ResultValue.MARIO_DEAD)
    more = Results()
    more.add(1, ResultValue.MARIO_DEAD)
    more.add(2, ResultValue.FINISHED)
    assert fewer.mismatches(more) == [
        "TEST FAILED - The actual game result has less results than the expected game result"
    ]