# kongclimb

A small arcade game played in the terminal. You are Mario (`@`) and your goal is
to reach Pauline (`$`). Donkey Kong (`&`) throws a new barrel (`O`) every 20
moves, and the barrels roll along the floors; ghosts (`x`, and ladder-climbing
`X`) wander along the platforms. Pick up the hammer (`p`) to smash barrels and
ghosts.

It needs only the standard library.

## Installing

```
pip install .
```

This installs the `kongclimb` command. The same entry point can also be started
with `python -m kongclimb.cli`.

## Levels

The game reads its levels from the current directory: every file whose name
starts with `dkong_` and ends in `.screen`, in sorted order. A level is a plain
text map of up to 80 columns by 25 rows; longer lines and extra lines are cut
off, and missing cells are blank.

| Character | Meaning |
|-----------|---------|
| `@` | Mario's start position |
| `$` | Pauline |
| `&` | Donkey Kong (where barrels appear) |
| `=` `<` `>` | Floors (barrels keep their direction, roll left or roll right) |
| `H` | Ladder |
| `p` | Hammer |
| `x` | Ghost |
| `X` | Climbing ghost |
| `Q` | Border |
| `L` | Where the lives and score legend is drawn |

Only the first `@`, `L`, `&`, `$` and `p` count; later ones become blank. A
level must have Mario, Pauline, Donkey Kong and a legend position, and every
ghost must start standing on a floor. An invalid level is reported, and the game
waits for `n` or `N` before trying the next one.

## Playing

```
kongclimb
```

The menu:

- `1` – play every level from the first
- `2` – pick a level by number (type the number and press Enter)
- `8` – show the instructions (`3` goes back to the menu)
- `9` – exit

Keys during play (upper case works as well):

- `a` / `d` – move left / right
- `w` – jump, or climb when on a ladder
- `x` – climb down
- `s` – stop
- `p` – swing the hammer, once it has been picked up
- `Esc` – pause; press `Esc` again to go on

You start with three lives. Reaching Pauline scores 100 points and moves on to
the next level; losing a life costs 50 points. Falling five rows or more, or a
barrel bursting within two cells of Mario after falling eight rows, costs a
life too.

## Recording and replaying

Record games, writing a `.steps` and a `.result` file next to each level that
is finished or lost:

```
kongclimb -save
```

A `.steps` file holds the random seed, the number of steps, and one
`iteration keys` line per step. A `.result` file holds the number of results,
one `iteration value` line per result (`0` for a death, `1` for a finished
level), and the final score.

Replay the recorded games and check that they end the same way:

```
kongclimb -load
```

Add `-silent` to replay without drawing the board or pausing:

```
kongclimb -load -silent
```

A replay prints `TEST PASSED` when the deaths, finishes and score match the
`.result` files, and otherwise says what differed or which file is missing.

## Using it from Python

`kongclimb.replay.ReplayGame(silent, board)` replays the levels of a
`kongclimb.board.Board(directory)` and its `run()` returns `True` when every
check passed. `kongclimb.records` holds the `Steps` and `Results` classes that
read and write the recording files.

## Limitations

- Levels are only looked for in one directory (the current one, from the
  command line); there is no option to point elsewhere.
- The command always exits with status 0, even when a replay fails; read its
  output to tell a pass from a failure.
- There is no colour and no stored high-score table.