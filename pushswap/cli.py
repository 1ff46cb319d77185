"""Command that prints the moves sorting the integers given as arguments."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence

from pushswap.parse import InputError, parse_arguments
from pushswap.sorting import is_sorted, sort_values

ERROR_MESSAGE = "Error"


def run(args: Iterable[str]) -> str:
    """Return the moves that sort ``args``, one per line.

    The first argument is the top of stack ``a``. Already sorted input
    gives an empty string. Raises InputError on invalid input.
    """
    values = parse_arguments(args)
    if is_sorted(list(reversed(values))):
        return ""
    if len(values) < 2:
        raise InputError("too few arguments")
    return "".join(f"{move}\n" for move in sort_values(values))


def main(argv: Sequence[str] | None = None) -> int:
    """Print the moves for the given arguments, or ``Error`` if they are invalid."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        output = run(args)
    except InputError:
        output = ERROR_MESSAGE
    sys.stdout.write(output)
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())