"""Strategies that sort stack ``a`` using only the moves of :class:`Stacks`.

Stacks are lists stored bottom first. Stack ``a`` counts as sorted when
its values do not increase from bottom to top, so that the smallest
value is on top.
"""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Iterable, Sequence
from itertools import chain, pairwise

from pushswap.stacks import Stacks

INT_MAX = 2**31 - 1

# Bounds of the chunked phases of the large sort.
_SMALL_TOTAL = 5
_MEDIUM_TOTAL = 100
_LARGE_TOTAL = 500
_KEEP = 10


def is_sorted(values: Sequence[int]) -> bool:
    """Return True if ``values`` (bottom first) never increase towards the top."""
    return all(lower >= upper for lower, upper in pairwise(values))


def _position(values: Sequence[int], number: int) -> int:
    """Return the index of ``number`` in ``values``, or -1 if it is absent."""
    try:
        return values.index(number)
    except ValueError:
        return -1


def first_in_med(values: Sequence[int], med_size: int, swap: int) -> int | None:
    """Return the value nearest the top that lies in the chunk of ``med_size``.

    The bottom element is left out of the search. With ``swap`` equal to 1
    a value qualifies when fewer than ``med_size`` of the others are
    smaller; with ``swap`` equal to 2, when fewer than ``med_size`` are
    larger. Returns None if no value qualifies.
    """
    candidates = list(values[1:])
    ranked = sorted(candidates)
    for value in reversed(candidates):
        if swap == 1:
            beaten = bisect_left(ranked, value)
        elif swap == 2:
            beaten = len(ranked) - bisect_right(ranked, value)
        else:
            beaten = 0
        if beaten < med_size:
            return value
    return None


def mini_sort(stacks: Stacks) -> None:
    """Sort an ``a`` of at most three values with at most two moves."""
    a = stacks.a
    max_pos = _position(a, max(a))
    if max_pos == 1:
        stacks.rra()
    elif max_pos == 2:
        stacks.ra()
    if not is_sorted(stacks.a):
        stacks.sa()


def _insert_top_of_b(stacks: Stacks) -> None:
    a = stacks.a
    value = stacks.b[-1]
    if value > max(a) or value < min(a):
        while a[-1] != min(a):
            stacks.ra()
    else:
        while a[-1] < value or a[0] > value:
            stacks.ra()
    stacks.pa()


def medium_sort(stacks: Stacks) -> None:
    """Sort an ``a`` of four or five values."""
    stacks.pb()
    stacks.pb()
    mini_sort(stacks)
    for _ in range(2):
        _insert_top_of_b(stacks)
    a = stacks.a
    while not is_sorted(a):
        if _position(a, min(a)) < len(a) // 2 + 1:
            stacks.rra()
        else:
            stacks.ra()


def _bring_up_and_push_to_b(stacks: Stacks, number: int | None) -> None:
    a = stacks.a
    if number is None or number not in a:
        raise ValueError(f"value {number!r} is not on stack a")
    if a.index(number) < len(a) // 2 + 1:
        while a[-1] != number:
            stacks.rra()
    else:
        while a[-1] != number:
            stacks.ra()
    stacks.pb()


def _bring_up_and_push_to_a(stacks: Stacks, number: int | None) -> None:
    b = stacks.b
    if number is None or number not in b:
        raise ValueError(f"value {number!r} is not on stack b")
    if b.index(number) < len(b) // 2:
        while b[-1] != number:
            stacks.rrb()
    else:
        while b[-1] != number:
            stacks.rb()
    stacks.pa()


def _push_chunk_to_b(stacks: Stacks, med_size: int, floor: int) -> None:
    chunk = len(stacks.a) // med_size
    if len(stacks.a) == 1:
        stacks.pb()
    while chunk > 0 and len(stacks.a) > floor:
        _bring_up_and_push_to_b(stacks, first_in_med(stacks.a, chunk, 1))
        chunk -= 1


def _push_chunk_to_a(stacks: Stacks, med_size: int, floor: int) -> None:
    chunk = max(len(stacks.b) // med_size, 1)
    while chunk > 0 and len(stacks.b) > floor:
        _bring_up_and_push_to_a(stacks, first_in_med(stacks.b, chunk, 2))
        chunk -= 1


def push_all_med_to_b(stacks: Stacks, total: int) -> None:
    """Move ``a`` to ``b`` chunk by chunk, smallest chunks first."""
    if total <= _SMALL_TOTAL:
        while len(stacks.a) > 1:
            _push_chunk_to_b(stacks, 2, 0)
    if total <= _MEDIUM_TOTAL:
        while len(stacks.a) > _KEEP:
            _push_chunk_to_b(stacks, 2, _KEEP)
    elif total <= _LARGE_TOTAL:
        while len(stacks.a) > _KEEP:
            _push_chunk_to_b(stacks, 5, _KEEP)


def push_all_med_to_a(stacks: Stacks, total: int) -> None:
    """Bring ``b`` back to ``a`` chunk by chunk, largest chunks first."""
    if total <= _MEDIUM_TOTAL:
        while len(stacks.b) > _KEEP:
            _push_chunk_to_a(stacks, 3, _KEEP)
    elif total <= _LARGE_TOTAL:
        while len(stacks.b) > _KEEP:
            _push_chunk_to_a(stacks, 4, _KEEP)


def _next_min(stacks: Stacks, current: int, highest: int) -> tuple[str, int]:
    min_a = min((v for v in stacks.a if v > current), default=highest)
    if stacks.b:
        min_b = min((v for v in stacks.b if v > current), default=highest)
    else:
        min_b = INT_MAX
    if current < min_a < min_b:
        return "a", min_a
    return "b", min_b


def _where_is(stacks: Stacks, value: int) -> str | None:
    if value in stacks.a:
        return "a"
    if value in stacks.b:
        return "b"
    return None


def _put_min_on_top(stacks: Stacks, value: int) -> None:
    if _where_is(stacks, value) == "a":
        a = stacks.a
        while a[-1] != value:
            if a[-2] == value:
                stacks.sa()
                return
            stacks.pb()
    else:
        _bring_up_and_push_to_a(stacks, value)


def big_sort(stacks: Stacks) -> None:
    """Sort any number of values, gathering them into ``a`` in ascending order."""
    total = len(stacks.a) + len(stacks.b)
    if total == 0:
        return
    highest = max(chain(stacks.a, stacks.b))
    push_all_med_to_b(stacks, total)
    push_all_med_to_a(stacks, total)
    current = min(chain(stacks.a, stacks.b))
    while not (is_sorted(stacks.a) and len(stacks.a) == total):
        next_stack, next_value = _next_min(stacks, current, highest)
        _put_min_on_top(stacks, current)
        b = stacks.b
        position = _position(b, next_value)
        if (
            next_stack == "b"
            and position != len(b) - 1
            and position > len(b) // 2 - 1
        ):
            stacks.rr()
        else:
            stacks.ra()
        current = next_value


def sort_values(values: Iterable[int]) -> list[str]:
    """Return the moves that sort ``values``, given with the first value on top.

    Raises ValueError if a value occurs more than once.
    """
    values = list(values)
    if len(set(values)) != len(values):
        raise ValueError("duplicate values")
    stacks = Stacks(reversed(values))
    if is_sorted(stacks.a):
        return []
    if len(values) <= 3:
        mini_sort(stacks)
    elif len(values) <= 5:
        medium_sort(stacks)
    else:
        big_sort(stacks)
    return list(stacks.operations)