"""Binary trees and their iterative traversals."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False, slots=True)
class TreeNode:
    """A node of a binary tree."""

    val: Any
    left: TreeNode | None = None
    right: TreeNode | None = None

    def __repr__(self) -> str:
        return f"TreeNode({self.val!r})"


def tree_from_level_order(values: Iterable[Any]) -> TreeNode | None:
    """Build a tree from level-order values where None marks a missing child."""
    items = iter(values)
    first = next(items, None)
    if first is None:
        return None
    root = TreeNode(first)
    queue = deque([root])
    while queue:
        node = queue.popleft()
        for side in ("left", "right"):
            value = next(items, None)
            if value is not None:
                child = TreeNode(value)
                setattr(node, side, child)
                queue.append(child)
    if any(value is not None for value in items):
        raise ValueError("values left over with no parent node")
    return root


def inorder(root: TreeNode | None) -> list[Any]:
    """Values in left, root, right order, using an explicit stack."""
    result = []
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        result.append(node.val)
        node = node.right
    return result


def preorder(root: TreeNode | None) -> list[Any]:
    """Values in root, left, right order."""
    if root is None:
        return []
    result = []
    stack = [root]
    while stack:
        node = stack.pop()
        result.append(node.val)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return result


def level_order(root: TreeNode | None) -> list[list[Any]]:
    """Values grouped by depth, read with a single queue."""
    if root is None:
        return []
    levels = []
    queue = deque([root])
    while queue:
        level = []
        for _ in range(len(queue)):
            node = queue.popleft()
            level.append(node.val)
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
        levels.append(level)
    return levels


def level_order_lists(root: TreeNode | None) -> list[list[Any]]:
    """Values grouped by depth, keeping one list of nodes per level."""
    if root is None:
        return []
    levels = []
    current = [root]
    while current:
        levels.append([node.val for node in current])
        current = [
            child
            for node in current
            for child in (node.left, node.right)
            if child is not None
        ]
    return levels


def morris_inorder(root: TreeNode | None) -> list[Any]:
    """In-order values in constant extra space; the tree is restored afterwards."""
    result = []
    current = root
    while current is not None:
        if current.left is None:
            result.append(current.val)
            current = current.right
            continue
        pre = current.left
        while pre.right is not None and pre.right is not current:
            pre = pre.right
        if pre.right is None:
            pre.right = current
            current = current.left
        else:
            pre.right = None
            result.append(current.val)
            current = current.right
    return result


def morris_inorder_destructive(root: TreeNode | None) -> list[Any]:
    """In-order values in constant extra space; the tree is flattened to the right."""
    result = []
    current = root
    while current is not None:
        if current.left is None:
            result.append(current.val)
            current = current.right
            continue
        pre = current.left
        while pre.right is not None:
            pre = pre.right
        pre.right = current
        left = current.left
        current.left = None
        current = left
    return result


def postorder(root: TreeNode | None) -> list[Any]:
    """Values in left, right, root order with one stack and the last emitted node."""
    result = []
    stack: list[TreeNode] = []
    previous: TreeNode | None = None
    node = root
    while stack or node is not None:
        if node is not None:
            stack.append(node)
            node = node.left
            continue
        top = stack[-1]
        if top.right is None or top.right is previous:
            result.append(top.val)
            stack.pop()
            previous = top
        else:
            node = top.right
    return result


def postorder_reversed(root: TreeNode | None) -> list[Any]:
    """Post-order values, by reading root, right, left and reversing."""
    if root is None:
        return []
    result = []
    stack = [root]
    while stack:
        node = stack.pop()
        result.append(node.val)
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    result.reverse()
    return result


def postorder_double_push(root: TreeNode | None) -> list[Any]:
    """Post-order values, pushing each node twice to tell descent from exit."""
    if root is None:
        return []
    result = []
    stack = [root, root]
    while stack:
        node = stack.pop()
        if stack and stack[-1] is node:
            for child in (node.right, node.left):
                if child is not None:
                    stack.extend((child, child))
        else:
            result.append(node.val)
    return result