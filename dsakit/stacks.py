"""Stack-based algorithms over Python lists used as stacks (top at the end)."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, TypeVar

T = TypeVar("T")

NO_INDEX = -1
"""Index reported when no smaller element exists on the searched side."""

_PAIRS = {")": "(", "]": "[", "}": "{"}
_OPENERS = frozenset(_PAIRS.values())


def delete_middle(stack: list[T]) -> T:
    """Remove and return the middle element of ``stack``.

    The middle is the element ``len(stack) // 2`` places below the top, so for
    an even number of elements the lower of the two middle elements goes.
    Raises IndexError for an empty stack.
    """
    if not stack:
        raise IndexError("cannot delete the middle of an empty stack")
    return stack.pop(len(stack) - 1 - len(stack) // 2)


def next_smaller(values: Sequence[Any]) -> list[int]:
    """For each position, return the index of the nearest strictly smaller value to its right.

    Positions with no such value get -1.
    """
    result = [NO_INDEX] * len(values)
    candidates: list[int] = []
    for index in reversed(range(len(values))):
        current = values[index]
        while candidates and values[candidates[-1]] >= current:
            candidates.pop()
        result[index] = candidates[-1] if candidates else NO_INDEX
        candidates.append(index)
    return result


def prev_smaller(values: Sequence[Any]) -> list[int]:
    """For each position, return the index of the nearest strictly smaller value to its left.

    Positions with no such value get -1.
    """
    result = [NO_INDEX] * len(values)
    candidates: list[int] = []
    for index, current in enumerate(values):
        while candidates and values[candidates[-1]] >= current:
            candidates.pop()
        result[index] = candidates[-1] if candidates else NO_INDEX
        candidates.append(index)
    return result


def largest_rectangle_area(heights: Sequence[int]) -> int:
    """Return the area of the largest rectangle that fits under the histogram.

    An empty histogram has area 0.
    """
    if not heights:
        return 0
    count = len(heights)
    nexts = next_smaller(heights)
    prevs = prev_smaller(heights)
    return max(
        height * ((count if after == NO_INDEX else after) - before - 1)
        for height, after, before in zip(heights, nexts, prevs)
    )


def reverse_string(text: str) -> str:
    """Return ``text`` reversed by pushing its characters on a stack and popping them."""
    stack = list(text)
    reversed_chars = []
    while stack:
        reversed_chars.append(stack.pop())
    return "".join(reversed_chars)


def sorted_insert(stack: list[T], value: T) -> None:
    """Insert ``value`` into a stack sorted ascending from bottom to top, keeping it sorted.

    A value equal to ones already present goes below them.
    """
    held: list[T] = []
    while stack and not stack[-1] < value:
        held.append(stack.pop())
    stack.append(value)
    while held:
        stack.append(held.pop())


def sort_stack(stack: list[T]) -> None:
    """Sort ``stack`` in place so that the largest value is on top."""
    pending: list[T] = []
    while stack:
        pending.append(stack.pop())
    while pending:
        sorted_insert(stack, pending.pop())


def is_valid_parentheses(text: str) -> bool:
    """Return whether every bracket in ``text`` is closed in the right order.

    Only the characters ``()[]{}`` are allowed; any other character makes the
    text invalid.
    """
    open_brackets: list[str] = []
    for char in text:
        if char in _OPENERS:
            open_brackets.append(char)
        elif open_brackets and _PAIRS.get(char) == open_brackets[-1]:
            open_brackets.pop()
        else:
            return False
    return not open_brackets