"""The two stacks of the puzzle and the eleven moves that act on them."""

from __future__ import annotations

from collections.abc import Iterable


class Stacks:
    """Stacks ``a`` and ``b`` with a log of the moves applied to them.

    Each stack is a list stored bottom first, so its top is the last
    element. Each move appends its name to :attr:`operations`.
    """

    def __init__(self, a: Iterable[int] = (), b: Iterable[int] = ()) -> None:
        self.a: list[int] = list(a)
        self.b: list[int] = list(b)
        self.operations: list[str] = []

    def __repr__(self) -> str:
        return f"Stacks(a={self.a!r}, b={self.b!r})"

    def count(self) -> int:
        """Return how many moves have been recorded."""
        return len(self.operations)

    def _record(self, name: str) -> None:
        self.operations.append(name)

    @staticmethod
    def _swap(stack: list[int]) -> None:
        if len(stack) > 1:
            stack[-1], stack[-2] = stack[-2], stack[-1]

    @staticmethod
    def _rotate(stack: list[int]) -> None:
        if stack:
            stack.insert(0, stack.pop())

    @staticmethod
    def _reverse_rotate(stack: list[int]) -> None:
        if stack:
            stack.append(stack.pop(0))

    def pa(self) -> None:
        """Move the top of ``b`` onto ``a``; nothing happens if ``b`` is empty."""
        if self.b:
            self.a.append(self.b.pop())
            self._record("pa")

    def pb(self) -> None:
        """Move the top of ``a`` onto ``b``; nothing happens if ``a`` is empty."""
        if self.a:
            self.b.append(self.a.pop())
            self._record("pb")

    def sa(self) -> None:
        """Swap the two top elements of ``a``."""
        self._swap(self.a)
        self._record("sa")

    def sb(self) -> None:
        """Swap the two top elements of ``b``."""
        self._swap(self.b)
        self._record("sb")

    def ss(self) -> None:
        """Swap the two top elements of both stacks."""
        self._swap(self.a)
        self._swap(self.b)
        self._record("ss")

    def ra(self) -> None:
        """Rotate ``a``: its top goes to the bottom."""
        self._rotate(self.a)
        self._record("ra")

    def rb(self) -> None:
        """Rotate ``b``: its top goes to the bottom."""
        self._rotate(self.b)
        self._record("rb")

    def rr(self) -> None:
        """Rotate both stacks."""
        self._rotate(self.a)
        self._rotate(self.b)
        self._record("rr")

    def rra(self) -> None:
        """Reverse-rotate ``a``: its bottom goes to the top, if it has one."""
        if self.a:
            self._reverse_rotate(self.a)
            self._record("rra")

    def rrb(self) -> None:
        """Reverse-rotate ``b``: its bottom goes to the top, if it has one."""
        if self.b:
            self._reverse_rotate(self.b)
            self._record("rrb")

    def rrr(self) -> None:
        """Reverse-rotate both stacks."""
        self._reverse_rotate(self.a)
        self._reverse_rotate(self.b)
        self._record("rrr")