"""Binary trees: building from token streams, traversals, height, diameter and balance."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

NULL_MARKER = -1


@dataclass
class TreeNode:
    """A node of a binary tree holding an integer."""

    data: int
    left: TreeNode | None = None
    right: TreeNode | None = None


def _token_stream(tokens: Iterable[int | str] | str) -> Iterator[int]:
    if isinstance(tokens, str):
        tokens = tokens.split()
    return (int(token) for token in tokens)


def _take(stream: Iterator[int]) -> int:
    try:
        return next(stream)
    except StopIteration:
        raise ValueError("not enough tokens to build the tree") from None


def build_preorder(tokens: Iterable[int | str] | str) -> TreeNode | None:
    """Build a tree from preorder tokens where ``-1`` marks a missing child.

    ``tokens`` may be an iterable of integers or a whitespace-separated string.
    """
    stream = _token_stream(tokens)

    def _build() -> TreeNode | None:
        value = _take(stream)
        if value == NULL_MARKER:
            return None
        node = TreeNode(value)
        node.left = _build()
        node.right = _build()
        return node

    return _build()


def build_level_order(tokens: Iterable[int | str] | str) -> TreeNode:
    """Build a tree from level-order tokens: the root, then a child pair per node.

    A child given as ``-1`` is absent. The root is always created.
    """
    stream = _token_stream(tokens)
    root = TreeNode(_take(stream))
    pending = deque([root])
    while pending:
        current = pending.popleft()
        left, right = _take(stream), _take(stream)
        if left != NULL_MARKER:
            current.left = TreeNode(left)
            pending.append(current.left)
        if right != NULL_MARKER:
            current.right = TreeNode(right)
            pending.append(current.right)
    return root


def levels(root: TreeNode | None) -> list[list[int]]:
    """Return the values of the tree level by level, left to right."""
    result: list[list[int]] = []
    current = [root] if root is not None else []
    while current:
        result.append([node.data for node in current])
        current = [
            child
            for node in current
            for child in (node.left, node.right)
            if child is not None
        ]
    return result


def level_order_text(root: TreeNode | None) -> str:
    """Return the level-order listing, one line per level, each value followed by a space."""
    return "".join(
        "".join(f"{value} " for value in level) + "\n" for level in levels(root)
    )


def height(root: TreeNode | None) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return 1 + max(height(root.left), height(root.right))


def diameter(root: TreeNode | None) -> int:
    """Return the tree's diameter by recomputing heights at every node."""
    if root is None:
        return 0
    through_root = height(root.left) + height(root.right)
    return max(through_root, diameter(root.left), diameter(root.right))


def _height_and_diameter(root: TreeNode | None) -> tuple[int, int]:
    if root is None:
        return 0, 0
    left_height, left_diameter = _height_and_diameter(root.left)
    right_height, right_diameter = _height_and_diameter(root.right)
    return (
        max(left_height, right_height) + 1,
        max(left_height + right_height, left_diameter, right_diameter),
    )


def diameter_fast(root: TreeNode | None) -> int:
    """Return the tree's diameter in a single post-order pass."""
    return _height_and_diameter(root)[1]


def _height_and_balance(root: TreeNode | None) -> tuple[int, bool]:
    if root is None:
        return 0, True
    left_height, left_ok = _height_and_balance(root.left)
    right_height, right_ok = _height_and_balance(root.right)
    balanced = left_ok and right_ok and abs(left_height - right_height) <= 1
    return max(left_height, right_height) + 1, balanced


def is_height_balanced(root: TreeNode | None) -> bool:
    """Tell whether every node's subtrees differ in height by at most one."""
    return _height_and_balance(root)[1]


def replace_with_descendant_sum(root: TreeNode | None) -> int:
    """Replace each inner node's value with the sum of its descendants, in place.

    Leaves keep their values. Returns the sum of the original subtree values.
    """
    if root is None:
        return 0
    if root.left is None and root.right is None:
        return root.data
    left_sum = replace_with_descendant_sum(root.left)
    right_sum = replace_with_descendant_sum(root.right)
    original = root.data
    root.data = left_sum + right_sum
    return root.data + original


def preorder(root: TreeNode | None) -> list[int]:
    """Return the values in preorder (node, left, right)."""
    if root is None:
        return []
    return [root.data, *preorder(root.left), *preorder(root.right)]


def inorder(root: TreeNode | None) -> list[int]:
    """Return the values in inorder (left, node, right)."""
    if root is None:
        return []
    return [*inorder(root.left), root.data, *inorder(root.right)]


def postorder(root: TreeNode | None) -> list[int]:
    """Return the values in postorder (left, right, node)."""
    if root is None:
        return []
    return [*postorder(root.left), *postorder(root.right), root.data]