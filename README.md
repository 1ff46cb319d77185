# pushswap

Finds a sequence of push_swap operations that sorts a list of distinct
integers. The command prints the operations one per line.

## The puzzle

There are two stacks, `a` and `b`. Stack `a` starts with the numbers, and
the first argument is on top. Stack `b` starts empty. Only these
operations are allowed:

| op    | effect                                               |
|-------|------------------------------------------------------|
| `sa`  | swap the top two elements of `a`                     |
| `sb`  | swap the top two elements of `b`                     |
| `ss`  | `sa` and `sb` together                               |
| `pa`  | move the top of `b` onto `a`                         |
| `pb`  | move the top of `a` onto `b`                         |
| `ra`  | rotate `a` up: the top element goes to the bottom    |
| `rb`  | rotate `b` up                                        |
| `rr`  | `ra` and `rb` together                               |
| `rra` | rotate `a` down: the bottom element goes to the top  |
| `rrb` | rotate `b` down                                      |
| `rrr` | `rra` and `rrb` together                             |

The goal is to have every number in `a` with the smallest on top, and `b`
empty.

## Installation

```
pip install .
```

## Command line

```
push-swap 3 2 5 1 4
```

This prints the operations that sort the numbers, one per line. If the
numbers are already in ascending order (this includes no arguments and a
single argument), it prints nothing.

If the input is invalid, the command prints `Error` with no trailing
newline. Input is invalid when:

- an argument contains anything other than the digits `0`–`9` and `-`
  (a leading `+` is not accepted);
- an argument is longer than eleven characters;
- the value read from the sign and leading digits falls outside the 32-bit
  signed range;
- the same number appears twice.

The exit status is always 0. You can also run the command with
`python -m pushswap.cli`.

## Library use

```python
from pushswap.sorting import sort_values, is_sorted
from pushswap.stacks import Stacks

ops = sort_values([3, 2, 5, 1, 4])   # list of operation names, first value on top

stacks = Stacks([4, 1, 5, 2, 3])     # lists are stored bottom first
stacks.pb()
stacks.ra()
print(stacks.a, stacks.b, stacks.operations, stacks.count())
```

- `pushswap.stacks.Stacks` holds lists `a` and `b`, stored bottom first,
  and has one method per operation. Each operation it applies is appended
  to `operations`, and `count()` returns the number of operations. `pa`,
  `pb`, `rra` and `rrb` do nothing and record nothing when the stack they
  take from is empty.
- `pushswap.sorting.sort_values(values)` returns the list of operations
  that sorts `values`. The first value is the top of `a`. It raises
  `ValueError` if there are duplicates. `is_sorted` checks a bottom-first
  list. The strategies `mini_sort` (up to three values), `medium_sort`
  (four or five values) and `big_sort` (any size) act directly on a
  `Stacks`.
- `pushswap.parse.parse_arguments(args)` checks the command-line strings
  and converts them to integers. `parse_int` and `is_int` check a single
  string. Invalid input raises `pushswap.parse.InputError`, which is a
  `ValueError`.
- `pushswap.cli.run(args)` returns the text that the command would print
  for valid input, and raises `InputError` otherwise.

## What it does not do

The package has no checker command that reads operations from standard
input and reports whether they sort a given list. To check a sequence,
apply it to a `Stacks` yourself.