# kattisolve

A collection of solutions to short programming-contest puzzles: simple
arithmetic, small decision problems, short pieces of text and character
grids. Each puzzle is a plain Python function that you can call from your
own code, and the `kattisolve` command runs any of them on the puzzle's
usual input read from standard input.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Using the functions

The solutions are grouped by kind:

- `kattisolve.arithmetic`: number puzzles such as `leggja_saman`,
  `two_sum`, `n_sum`, `aldur`, `bladra`, `metronome`, `flatbokuveisla`,
  `framtidar_fifa` and `a_different_problem`. Division and remainder
  round toward zero, so `flatbokuveisla(-7, 2)` is `-1`.
- `kattisolve.decisions`: puzzles that choose one answer among several,
  such as `quadrant`, `skak`, `sort_two`, `kiki_boba`, `takkar`,
  `dagatal` (which gives `-1` for a month that does not exist),
  `barcelona` and `besta_gjofin`, which takes `Gift(name, num)` objects.
  `barcelona` and `besta_gjofin` raise `ValueError` when given nothing.
- `kattisolve.text`: puzzles that produce text, such as `hello_world`,
  `echo`, `viosnuningur`, `reduplication`, `autori`, `leynibjonusta`,
  `telja`, `hiphiphurra` and `takk_fyrir_mig`. Functions whose answer is
  several lines return a list of those lines.
- `kattisolve.grids`: puzzles on character grids given as a list of row
  strings. `hakkari` returns the 1-based `(row, column)` of every `*`;
  `umferd` returns the fraction of cells that are `.` and raises
  `ValueError` for an empty grid.

```python
from kattisolve.arithmetic import leggja_saman
from kattisolve.decisions import Gift, besta_gjofin, take_two_stones
from kattisolve.grids import hakkari

leggja_saman(2, 3)                                   # 5
take_two_stones(4)                                   # "Bob"
besta_gjofin([Gift("Anna", 3), Gift("Bjorn", 7)])    # "Bjorn"
hakkari([".*", "*."])                                # [(1, 2), (2, 1)]
```

## Using the command line

The `kattisolve` command takes the name of a puzzle, reads that puzzle's
input from standard input and prints the answer:

```
echo "2 3" | kattisolve leggja-saman
```

Puzzle names are written with hyphens, for example `two-sum`,
`which-is-greater`, `take-two-stones`, `hello-world` and `hakkari`. To see
them all:

```
kattisolve --list
```

Real-valued answers (`bladra`, `metronome`, `umferd`) are printed with six
significant digits. If the input cannot be read, or a puzzle rejects it,
the command prints a message to standard error and exits with status 1.

From Python, `kattisolve.cli.problems()` returns the sorted list of puzzle
names, and `kattisolve.cli.solve(problem, text)` returns the printed answer
for an input given as a string; it raises `ValueError` for an unknown
puzzle name or malformed input.

```python
from kattisolve.cli import solve

solve("sort-two", "9 4")    # "4 9"
```