import pytest

from kongclimb.board import GAME_HEIGHT, GAME_WIDTH, OFF_BOARD, Board, is_floor

VALID = [
    "L",
    " &  &   $ $  p p",
    "=================",
    "  @  @   x",
    "<<<<<<<<<<<<>>>>",
]


def write_map(directory, name, lines, newline="\n"):
    (directory / name).write_bytes((newline.join(lines) + newline).encode("latin-1"))
    return name


def test_find_screen_files_filters_and_sorts(tmp_path):
    for name in ("dkong_b.screen", "dkong_a.screen", "other.screen", "dkong_c.txt"):
        (tmp_path / name).write_text("")
    board = Board(tmp_path)
    assert board.find_screen_files() == ["dkong_a.screen", "dkong_b.screen"]
    assert board.file_count == 2
    assert board.file_name(1) == "dkong_b.screen"


def test_file_name_out_of_range(tmp_path):
    board = Board(tmp_path)
    assert board.file_count == 0
    with pytest.raises(IndexError):
        board.file_name(0)


def test_load_valid_map_records_positions(tmp_path):
    board = Board(tmp_path)
    assert board.load(write_map(tmp_path, "dkong_a.screen", VALID)) is True
    assert board.mario_start == (2, 3)
    assert board.donkey_start == (1, 1)
    assert board.legend_position == (0, 0)
    assert board.hammer_start == (13, 1)
    assert board.regular_ghost_starts == [(9, 3)]
    assert board.climb_ghost_starts == []


def test_load_keeps_only_first_unique_objects(tmp_path):
    board = Board(tmp_path)
    board.load(write_map(tmp_path, "dkong_a.screen", VALID))
    assert board.get_original(1, 1) == "&"
    assert board.get_original(4, 1) == " "
    assert board.get_original(8, 1) == "$"
    assert board.get_original(10, 1) == " "
    assert board.get_original(13, 1) == "p"
    assert board.get_original(15, 1) == " "
    assert board.get_original(2, 3) == " "
    assert board.get_original(9, 3) == " "
    assert board.get_original(0, 0) == " "


def test_load_pads_rows_and_columns(tmp_path):
    board = Board(tmp_path)
    board.load(write_map(tmp_path, "dkong_a.screen", VALID))
    assert board.get_original(GAME_WIDTH - 1, 2) == " "
    assert all(board.get_original(x, GAME_HEIGHT - 1) == " " for x in range(GAME_WIDTH))


def test_load_ignores_characters_beyond_width(tmp_path):
    lines = ["L", "&  $", "=" * GAME_WIDTH + "@", "=" * GAME_WIDTH]
    board = Board(tmp_path)
    assert board.load(write_map(tmp_path, "dkong_a.screen", lines)) is False


def test_load_windows_line_endings_match(tmp_path):
    unix = Board(tmp_path)
    unix.load(write_map(tmp_path, "dkong_a.screen", VALID))
    dos = Board(tmp_path)
    dos.load(write_map(tmp_path, "dkong_b.screen", VALID, newline="\r\n"))
    assert all(
        unix.get_original(x, y) == dos.get_original(x, y)
        for y in range(GAME_HEIGHT)
        for x in range(GAME_WIDTH)
    )


@pytest.mark.parametrize("missing", ["@", "&", "$", "L"])
def test_load_requires_all_key_objects(tmp_path, missing):
    lines = [line.replace(missing, " ") for line in VALID]
    board = Board(tmp_path)
    assert board.load(write_map(tmp_path, "dkong_a.screen", lines)) is False


def test_load_rejects_ghost_without_floor(tmp_path):
    lines = VALID[:3] + ["  @" + " " * 17 + "x", VALID[4]]
    board = Board(tmp_path)
    assert board.load(write_map(tmp_path, "dkong_a.screen", lines)) is False


def test_load_rejects_climb_ghost_on_last_row(tmp_path):
    lines = VALID + [""] * (GAME_HEIGHT - len(VALID) - 1) + ["X"]
    board = Board(tmp_path)
    assert board.load(write_map(tmp_path, "dkong_a.screen", lines)) is False
    assert board.climb_ghost_starts == [(0, GAME_HEIGHT - 1)]


def test_load_missing_file(tmp_path):
    board = Board(tmp_path)
    assert board.load("dkong_none.screen") is False


def test_reset_copies_original_to_current(tmp_path):
    board = Board(tmp_path)
    board.set_silent()
    board.load(write_map(tmp_path, "dkong_a.screen", VALID))
    board.reset(3, 0)
    assert all(
        board.get_current(x, y) == board.get_original(x, y)
        for y in range(GAME_HEIGHT)
        for x in range(GAME_WIDTH)
    )
    board.set_current(5, 5, "O")
    assert board.get_current(5, 5) == "O"
    assert board.get_original(5, 5) == " "


def test_render_shows_life_and_score(tmp_path, capsys):
    board = Board(tmp_path)
    board.load(write_map(tmp_path, "dkong_a.screen", VALID))
    board.reset(3, 40)
    out = capsys.readouterr().out
    assert "Mario's Life : ***" in out
    assert "Mario's Score: : 40" in out
    assert "=================" in out


def test_silent_flag(tmp_path):
    board = Board(tmp_path)
    assert board.silent is False
    board.set_silent()
    assert board.silent is True


def test_off_board_access(tmp_path):
    board = Board(tmp_path)
    board.set_original(-1, 0, "Q")
    board.set_current(GAME_WIDTH, 0, "Q")
    assert board.get_original(-1, 0) == OFF_BOARD
    assert board.get_current(GAME_WIDTH, 0) == OFF_BOARD
    assert board.get_original(0, GAME_HEIGHT) == OFF_BOARD


@pytest.mark.parametrize("ch,expected", [("<", True), (">", True), ("=", True), (" ", False), ("H", False), ("", False)])
def test_is_floor(ch, expected):
    assert is_floor(ch) is expected