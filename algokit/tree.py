"""Binary trees and binary search trees."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class TreeNode:
    """One node of a binary tree."""

    val: int = 0
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def build_tree(values: Iterable[Optional[int]]) -> Optional[TreeNode]:
    """Build a tree from level-order values, with None for missing children."""
    items = iter(values)
    first = next(items, None)
    if first is None:
        return None
    root = TreeNode(first)
    pending = deque([root])
    while pending:
        node = pending.popleft()
        for side in ("left", "right"):
            try:
                value = next(items)
            except StopIteration:
                return root
            if value is not None:
                child = TreeNode(value)
                setattr(node, side, child)
                pending.append(child)
    return root


def tree_values(root: Optional[TreeNode]) -> list[Optional[int]]:
    """Return level-order values with None for missing children, trailing Nones dropped."""
    result: list[Optional[int]] = []
    pending: deque[Optional[TreeNode]] = deque([root])
    while pending:
        node = pending.popleft()
        if node is None:
            result.append(None)
            continue
        result.append(node.val)
        pending.append(node.left)
        pending.append(node.right)
    while result and result[-1] is None:
        result.pop()
    return result


def _inorder(root: Optional[TreeNode]) -> Iterator[int]:
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node.val
        node = node.right


def kth_smallest(root: Optional[TreeNode], k: int) -> int:
    """Return the ``k``-th smallest value (1-based) of a binary search tree."""
    if k < 1:
        raise ValueError(f"k must be at least 1, got {k}")
    for position, value in enumerate(_inorder(root), start=1):
        if position == k:
            return value
    raise ValueError(f"tree has fewer than {k} nodes")


def is_valid_bst(root: Optional[TreeNode]) -> bool:
    """Tell whether the tree is a binary search tree with strictly ordered keys."""
    pending: list[tuple[Optional[TreeNode], float, float]] = [
        (root, float("-inf"), float("inf"))
    ]
    while pending:
        node, low, high = pending.pop()
        if node is None:
            continue
        if not low < node.val < high:
            return False
        pending.append((node.left, low, node.val))
        pending.append((node.right, node.val, high))
    return True


def max_depth(root: Optional[TreeNode]) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    depth = 0
    level = [root] if root is not None else []
    while level:
        depth += 1
        level = [child for node in level for child in (node.left, node.right) if child]
    return depth


def invert_tree(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Mirror the tree in place and return its root."""
    if root is not None:
        root.left, root.right = invert_tree(root.right), invert_tree(root.left)
    return root


def diameter(root: Optional[TreeNode]) -> int:
    """Return the number of edges on the longest path between any two nodes."""
    best = 0

    def height(node: Optional[TreeNode]) -> int:
        nonlocal best
        if node is None:
            return 0
        left, right = height(node.left), height(node.right)
        best = max(best, left + right)
        return 1 + max(left, right)

    height(root)
    return best


def is_balanced(root: Optional[TreeNode]) -> bool:
    """Tell whether every node's subtrees differ in height by at most one."""
    balanced = True

    def height(node: Optional[TreeNode]) -> int:
        nonlocal balanced
        if node is None:
            return 0
        left, right = height(node.left), height(node.right)
        if abs(left - right) > 1:
            balanced = False
        return 1 + max(left, right)

    height(root)
    return balanced


def is_same_tree(p: Optional[TreeNode], q: Optional[TreeNode]) -> bool:
    """Tell whether two trees have the same shape and values."""
    if p is None or q is None:
        return p is q
    return p.val == q.val and is_same_tree(p.left, q.left) and is_same_tree(p.right, q.right)


def is_subtree(root: Optional[TreeNode], sub_root: Optional[TreeNode]) -> bool:
    """Tell whether ``sub_root`` equals some node's whole subtree in ``root``."""
    if sub_root is None:
        return True
    if root is None:
        return False
    if is_same_tree(root, sub_root):
        return True
    return is_subtree(root.left, sub_root) or is_subtree(root.right, sub_root)