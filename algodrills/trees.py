"""Binary trees built from level-order strings, with a few queries."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass


@dataclass(eq=False)
class Node:
    """A binary tree node holding an integer."""

    data: int
    left: Node | None = None
    right: Node | None = None


def build_tree(text: str) -> Node | None:
    """Build a tree from space-separated values in level order.

    ``N`` marks a missing child. An empty string, or one that starts with
    ``N``, gives an empty tree.
    """
    if not text or text[0] == "N":
        return None
    tokens = text.split()
    if not tokens:
        raise ValueError("tree description holds no values")

    root = Node(int(tokens[0]))
    pending: deque[Node] = deque([root])
    values = iter(tokens[1:])
    while pending:
        current = pending.popleft()
        token = next(values, None)
        if token is None:
            break
        if token != "N":
            current.left = Node(int(token))
            pending.append(current.left)
        token = next(values, None)
        if token is None:
            break
        if token != "N":
            current.right = Node(int(token))
            pending.append(current.right)
    return root


def _children(node: Node) -> list[Node]:
    return [child for child in (node.left, node.right) if child is not None]


def height(root: Node | None) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    levels = 0
    layer = [root] if root is not None else []
    while layer:
        levels += 1
        layer = [child for node in layer for child in _children(node)]
    return levels


def kth_ancestor(root: Node | None, k: int, node: int) -> int:
    """Return the value of the ``k``-th ancestor of the node holding ``node``.

    Returns -1 when the node has fewer than ``k`` ancestors. Raises
    ``ValueError`` if no node holds the value.
    """
    if root is None:
        raise ValueError("tree is empty")
    parent: dict[Node, Node] = {}
    queue: deque[Node] = deque([root])
    while queue:
        current = queue.popleft()
        if current.data == node:
            while k and current is not root:
                current = parent[current]
                k -= 1
            return current.data if k == 0 else -1
        for child in _children(current):
            parent[child] = current
            queue.append(child)
    raise ValueError(f"no node holds the value {node}")


def leaves_at_same_level(root: Node | None) -> bool:
    """Return whether every leaf is at the same depth; False for no tree."""
    leaf_levels: set[int] = set()
    stack = [(root, 0)] if root is not None else []
    while stack:
        current, level = stack.pop()
        children = _children(current)
        if not children:
            leaf_levels.add(level)
        stack.extend((child, level + 1) for child in children)
    return len(leaf_levels) == 1