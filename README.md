# pushswap

Sorts a list of distinct integers using two stacks, `a` and `b`, and a small
set of instructions. The `push_swap` command prints the instructions it uses,
one per line; applying them in order to the input leaves stack `a` sorted in
ascending order (smallest on top) and stack `b` empty.

## Instructions

| Name  | Effect                                              |
|-------|-----------------------------------------------------|
| `sa`  | swap the top two elements of `a`                    |
| `sb`  | swap the top two elements of `b`                    |
| `ss`  | `sa` and `sb` together                              |
| `pa`  | move the top of `b` onto `a`                        |
| `pb`  | move the top of `a` onto `b`                        |
| `ra`  | rotate `a` up: the first element becomes the last   |
| `rb`  | rotate `b` up                                       |
| `rr`  | `ra` and `rb` together                              |
| `rra` | rotate `a` down: the last element becomes the first |
| `rrb` | rotate `b` down                                     |
| `rrr` | `rra` and `rrb` together                            |

`ss`, `rr` and `rrr` only take effect when both stacks hold at least two
numbers.

## Installation

```
pip install .
```

## Command line

Numbers can be given as separate arguments or as one space-separated string;
the first number given is the top of stack `a`.

```
push_swap 3 2 1
push_swap "4 67 3 87 23"
```

The same entry point can be started with `python -m pushswap.cli`.

Only digits, `+`, `-` and spaces are accepted. Input that is not a list of
distinct integers within the 32-bit signed range prints `Error` on standard
output. An already sorted list, or no arguments at all, prints nothing.

Small inputs (up to five numbers) are sorted with fixed short sequences;
larger ones by repeatedly pushing the cheapest number of `a` onto `b` and
merging back.

## Library use

```python
from pushswap.stack import Board
from pushswap.algorithm import sort_stack

board = Board([3, 1, 2])
sort_stack(board)
print(board.a_values())  # [1, 2, 3]
print(board.moves)       # ['ra']
```

- `pushswap.stack.Board` holds the two stacks (`a`, `b`, top first) and a
  `moves` list. It has one method per instruction (`sa`, `pb`, `rra`, ...),
  each returning `False` and recording nothing when it cannot apply.
- `pushswap.stack` also provides `is_sorted`, `is_desc_sorted`,
  `is_rotated_sorted` and `format_stack`.
- `pushswap.cli.push_swap(args)` returns the list of instructions for raw
  string arguments.
- `pushswap.parsing.sanitize_entry(argv)` checks and splits raw arguments the
  same way the command does, returning the numbers or raising
  `pushswap.parsing.InputError`.

## Not included

There is no command that reads a list of instructions and checks whether it
sorts a given input. The `Board` methods are named after the instructions, so
a list of moves can be replayed on a fresh `Board` to check it in code.

## Tests

```
pip install .[test]
pytest
```