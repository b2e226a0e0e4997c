"""Binary trees: construction from value streams, traversals and measurements."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional

NULL_MARKER = -1
"""Value that stands for a missing child in integer value streams."""

MISSING_TOKEN = "N"
"""Token that stands for a missing child in textual level-order input."""


@dataclass
class Node:
    """A binary tree node holding an integer."""

    data: int
    left: Optional["Node"] = None
    right: Optional["Node"] = None


def _take(values: Iterator[int]) -> int:
    try:
        return next(values)
    except StopIteration:
        raise ValueError("not enough values to build the tree") from None


def build_preorder(values: Iterable[int]) -> Optional[Node]:
    """Build a tree from values in preorder, where -1 marks an absent subtree."""
    stream = iter(values)

    def build() -> Optional[Node]:
        value = _take(stream)
        if value == NULL_MARKER:
            return None
        node = Node(value)
        node.left = build()
        node.right = build()
        return node

    return build()


def build_level_order(values: Iterable[int]) -> Node:
    """Build a tree level by level.

    The first value is the root; after that each node in breadth-first order
    takes a left and a right value, where -1 marks an absent child.
    """
    stream = iter(values)
    root = Node(_take(stream))
    pending = deque([root])
    while pending:
        node = pending.popleft()
        left = _take(stream)
        if left != NULL_MARKER:
            node.left = Node(left)
            pending.append(node.left)
        right = _take(stream)
        if right != NULL_MARKER:
            node.right = Node(right)
            pending.append(node.right)
    return root


def build_tree(text: str) -> Optional[Node]:
    """Build a tree from space separated level-order tokens, "N" for no child.

    Input that runs out early leaves the remaining children absent.
    """
    tokens = text.split()
    if not text or text[0] == MISSING_TOKEN or not tokens:
        return None

    root = Node(int(tokens[0]))
    pending = deque([root])
    remaining = iter(tokens[1:])
    while pending:
        node = pending.popleft()

        token = next(remaining, None)
        if token is None:
            break
        if token != MISSING_TOKEN:
            node.left = Node(int(token))
            pending.append(node.left)

        token = next(remaining, None)
        if token is None:
            break
        if token != MISSING_TOKEN:
            node.right = Node(int(token))
            pending.append(node.right)
    return root


def level_order(root: Optional[Node]) -> list[list[int]]:
    """Return the values of the tree grouped by level, top to bottom."""
    levels: list[list[int]] = []
    current = [root] if root is not None else []
    while current:
        levels.append([node.data for node in current])
        current = [
            child
            for node in current
            for child in (node.left, node.right)
            if child is not None
        ]
    return levels


def _inorder(node: Optional[Node]) -> Iterator[int]:
    if node is None:
        return
    yield from _inorder(node.left)
    yield node.data
    yield from _inorder(node.right)


def _preorder(node: Optional[Node]) -> Iterator[int]:
    if node is None:
        return
    yield node.data
    yield from _preorder(node.left)
    yield from _preorder(node.right)


def _postorder(node: Optional[Node]) -> Iterator[int]:
    if node is None:
        return
    yield from _postorder(node.left)
    yield from _postorder(node.right)
    yield node.data


def inorder(root: Optional[Node]) -> list[int]:
    """Return the values in left, node, right order."""
    return list(_inorder(root))


def preorder(root: Optional[Node]) -> list[int]:
    """Return the values in node, left, right order."""
    return list(_preorder(root))


def postorder(root: Optional[Node]) -> list[int]:
    """Return the values in left, right, node order."""
    return list(_postorder(root))


def max_depth(root: Optional[Node]) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return max(max_depth(root.left), max_depth(root.right)) + 1


def _depth_and_diameter(node: Optional[Node]) -> tuple[int, int]:
    if node is None:
        return 0, 0
    left_depth, left_best = _depth_and_diameter(node.left)
    right_depth, right_best = _depth_and_diameter(node.right)
    through_node = left_depth + 1 + right_depth
    return max(left_depth, right_depth) + 1, max(left_best, right_best, through_node)


def diameter(root: Optional[Node]) -> int:
    """Return the number of nodes on the longest path between any two nodes."""
    return _depth_and_diameter(root)[1]


def zigzag(root: Optional[Node]) -> list[int]:
    """Return the level-order values, alternating left-to-right and right-to-left."""
    result: list[int] = []
    for depth, level in enumerate(level_order(root)):
        result.extend(level if depth % 2 == 0 else reversed(level))
    return result


def main(argv: Optional[list[str]] = None) -> int:
    """Read a count and that many level-order trees from stdin; print each zig-zag."""
    parser = argparse.ArgumentParser(
        prog="dsakit-zigzag",
        description=(
            "Read a number of test cases, then one level-order tree per line "
            "('N' for a missing child), and print each tree's zig-zag traversal."
        ),
    )
    parser.parse_args(argv)

    lines = iter(sys.stdin.read().splitlines())
    header = next((line for line in lines if line.strip()), None)
    if header is None:
        return 0
    count = int(header.split()[0])
    for _ in range(count):
        line = next(lines, "")
        values = zigzag(build_tree(line))
        print("".join(f"{value} " for value in values))
    return 0


if __name__ == "__main__":
    sys.exit(main())