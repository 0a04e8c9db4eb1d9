"""The two stacks of the puzzle and the instructions that act on them."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Optional


@dataclass(eq=False)
class Node:
    """One number on a stack, with the marks the sorting strategy uses."""

    value: int
    index: int = 0
    cost: int = 0
    cost_to_swap: int = 0
    is_min: bool = False
    is_mid: bool = False
    is_max: bool = False
    is_lowcost: bool = False
    target_node: Optional["Node"] = field(default=None, repr=False)


class Board:
    """Stacks a and b (top first) and the instructions played on them."""

    def __init__(self, values: Iterable[int]) -> None:
        self.a: list[Node] = [Node(value) for value in values]
        self.b: list[Node] = []
        self.moves: list[str] = []

    def a_values(self) -> list[int]:
        return [node.value for node in self.a]

    def b_values(self) -> list[int]:
        return [node.value for node in self.b]

    @staticmethod
    def _swap(stack: list[Node]) -> None:
        stack[0], stack[1] = stack[1], stack[0]

    @staticmethod
    def _rotate(stack: list[Node]) -> None:
        stack.append(stack.pop(0))

    @staticmethod
    def _reverse_rotate(stack: list[Node]) -> None:
        stack.insert(0, stack.pop())

    def _single(self, stack: list[Node], action, name: str) -> bool:
        if len(stack) < 2:
            return False
        action(stack)
        self.moves.append(name)
        return True

    def _double(self, action, name: str) -> bool:
        if len(self.a) < 2 or len(self.b) < 2:
            return False
        action(self.a)
        action(self.b)
        self.moves.append(name)
        return True

    def _push(self, source: list[Node], target: list[Node], name: str) -> bool:
        if not source:
            return False
        target.insert(0, source.pop(0))
        self.moves.append(name)
        return True

    def sa(self) -> bool:
        """Swap the top two of a."""
        return self._single(self.a, self._swap, "sa")

    def sb(self) -> bool:
        """Swap the top two of b."""
        return self._single(self.b, self._swap, "sb")

    def ss(self) -> bool:
        """Swap the top two of both stacks, only if both hold two or more."""
        return self._double(self._swap, "ss")

    def pa(self) -> bool:
        """Move the top of b onto a."""
        return self._push(self.b, self.a, "pa")

    def pb(self) -> bool:
        """Move the top of a onto b."""
        return self._push(self.a, self.b, "pb")

    def ra(self) -> bool:
        """Move the top of a to its bottom."""
        return self._single(self.a, self._rotate, "ra")

    def rb(self) -> bool:
        """Move the top of b to its bottom."""
        return self._single(self.b, self._rotate, "rb")

    def rr(self) -> bool:
        """Rotate both stacks, only if both hold two or more."""
        return self._double(self._rotate, "rr")

    def rra(self) -> bool:
        """Move the bottom of a to its top."""
        return self._single(self.a, self._reverse_rotate, "rra")

    def rrb(self) -> bool:
        """Move the bottom of b to its top."""
        return self._single(self.b, self._reverse_rotate, "rrb")

    def rrr(self) -> bool:
        """Reverse-rotate both stacks, only if both hold two or more."""
        return self._double(self._reverse_rotate, "rrr")


def _values(nodes: Iterable[Node]) -> list[int]:
    return [node.value for node in nodes]


def is_sorted(nodes: Iterable[Node]) -> bool:
    """True if the stack is non-empty and ascending from the top."""
    values = _values(nodes)
    if not values:
        return False
    return all(x <= y for x, y in zip(values, values[1:]))


def is_desc_sorted(nodes: Iterable[Node]) -> bool:
    """True if the stack is non-empty and descending from the top."""
    values = _values(nodes)
    if not values:
        return False
    return all(x >= y for x, y in zip(values, values[1:]))


def is_rotated_sorted(nodes: Iterable[Node]) -> bool:
    """True if the stack is a rotation of an ascending sequence."""
    values = _values(nodes)
    if not values:
        return False
    descents = sum(1 for x, y in zip(values, values[1:]) if x > y)
    if descents == 0:
        return True
    return descents == 1 and values[-1] <= values[0]


def align_minimum(board: Board) -> bool:
    """Rotate a rotated-sorted stack a so that it is sorted.

    Uses the ``is_min`` and ``cost`` marks already set on the nodes of a.
    Returns True if a is sorted afterwards, False if nothing could be done.
    """
    if is_sorted(board.a):
        return True
    if not is_rotated_sorted(board.a):
        return False
    minimum = next((node for node in board.a if node.is_min), None)
    if minimum is None:
        return False
    cost = minimum.cost
    step = board.rra if cost < 0 else board.ra
    for _ in range(abs(cost)):
        step()
    return True


def format_stack(nodes: Sequence[Node]) -> str:
    """The values of a stack from the top, separated by commas."""
    return ", ".join(str(value) for value in _values(nodes))