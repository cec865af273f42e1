# aoc2024

Solutions to the 2024 Advent of Code puzzles, days 1 to 18. Each day is a
module, `aoc2024.day01` to `aoc2024.day18`, with a `part1` and a `part2`
function. They take the puzzle input as a string and return the answer.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

```python
from pathlib import Path

from aoc2024 import day01

text = Path("input.txt").read_text().strip()

print(day01.part1(text))
print(day01.part2(text))
```

Strip the trailing newline from the input first. Most days split the text on
newlines and treat every line as data.

Most days take only the input text. A few take more arguments or return
something other than a single integer:

- `day11.count_stones(text, blinks)` counts the stones after any number of
  blinks. `part1` uses 25 blinks and `part2` uses 75.
- `day14.part1(text, width, height)` and `day14.part2(text, width, height)`
  take the size of the robots' area. The real puzzle uses 101 × 103, and the
  example uses 11 × 7. When `part2` finds the picture, it draws it on
  standard error and then returns the second at which it appeared.
- `day16.part1` returns `sys.maxsize` when the end cannot be reached.
- `day17.part1(text)` returns the program's output as a list of integers.
  `day17.parse(text)` returns a `Machine`, and its `run()` method executes
  the program and returns the output. An invalid opcode or combo operand
  raises `ValueError`.
- `day17.part2(text)` does not search for the register value. It checks one
  fixed candidate, `day17.PART2_CANDIDATE`, and returns it if the program
  reproduces itself from that value. Otherwise it returns `-1`.
- `day18.part1(text, drops, ex, ey)` gives the shortest path length from
  `(0, 0)` to `(ex, ey)` after the first `drops` bytes have fallen. It
  returns `day18.UNREACHABLE` (`sys.maxsize`) when there is no path.
  `day18.part2(text, ex, ey)` returns `[x, y]` for the first byte that cuts
  the path off.
- `day15` raises `ValueError` for a move character other than `^ v < >`.

The `aoc2024.utils` module holds the shared helpers:

- `get_all_numbers` pulls every signed integer out of a string.
- `Coordinate2D` is an immutable grid position with `add` and `opposite`.
- `get_2d_directions` gives the four orthogonal steps.
- `int_pow`, `set_bit` and `has_bit` are small integer helpers.
- `next_perm` and `get_perm` step through and apply swap-index permutation
  vectors.

## Limitations

The package has no command-line program, and it does not fetch or read
puzzle inputs. Read the input yourself and pass it in as a string. It has no
solutions for days 19 to 25.