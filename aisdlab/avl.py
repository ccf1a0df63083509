"""AVL trees keyed by integers, with set and sequence operations on them."""

from __future__ import annotations

import random
from collections import Counter
from dataclasses import dataclass
from typing import Iterable, Iterator


@dataclass(eq=False)
class Node:
    """One tree node: a key, its position in a sequence and its subtrees."""

    key: int
    index: int = 0
    height: int = 1
    left: Node | None = None
    right: Node | None = None


def height(node: Node | None) -> int:
    """Height of a subtree; an empty one has height 0."""
    return 0 if node is None else node.height


def _update_height(node: Node) -> None:
    node.height = max(height(node.left), height(node.right)) + 1


def _rotate_right(p: Node) -> Node:
    q = p.left
    p.left = q.right
    q.right = p
    _update_height(p)
    _update_height(q)
    return q


def _rotate_left(q: Node) -> Node:
    p = q.right
    q.right = p.left
    p.left = q
    _update_height(q)
    _update_height(p)
    return p


def _balance(p: Node) -> Node:
    _update_height(p)
    if height(p.left) - height(p.right) == 2:
        if height(p.left.right) > height(p.left.left):
            p.left = _rotate_left(p.left)
        return _rotate_right(p)
    if height(p.right) - height(p.left) == 2:
        if height(p.right.left) > height(p.right.right):
            p.right = _rotate_right(p.right)
        return _rotate_left(p)
    return p


def insert(node: Node | None, key: int, index: int) -> Node:
    """Insert a key and return the new root; equal keys go to the right."""
    if node is None:
        return Node(key, index)
    if key < node.key:
        node.left = insert(node.left, key, index)
    else:
        node.right = insert(node.right, key, index)
    return _balance(node)


def find_min(node: Node) -> Node:
    """The node with the smallest key in a non-empty tree."""
    if node is None:
        raise ValueError("empty tree has no minimum")
    while node.left is not None:
        node = node.left
    return node


def remove_min(node: Node) -> Node | None:
    """Detach the node with the smallest key and return the new root."""
    if node.left is None:
        return node.right
    node.left = remove_min(node.left)
    return _balance(node)


def remove(node: Node | None, key: int, index: int = 0) -> Node | None:
    """Remove one node holding ``key`` and return the new root."""
    if node is None:
        return None
    if key < node.key:
        node.left = remove(node.left, key, index)
    elif key > node.key:
        node.right = remove(node.right, key, index)
    else:
        left, right = node.left, node.right
        if right is None:
            return left
        smallest = find_min(right)
        smallest.right = remove_min(right)
        smallest.left = left
        return _balance(smallest)
    return _balance(node)


def preorder(node: Node | None) -> Iterator[tuple[int, int]]:
    """Yield ``(key, index)`` pairs, root first, then left and right subtrees."""
    if node is None:
        return
    yield node.key, node.index
    yield from preorder(node.left)
    yield from preorder(node.right)


def inorder_keys(node: Node | None) -> list[int]:
    """Keys in ascending order."""
    if node is None:
        return []
    return [*inorder_keys(node.left), node.key, *inorder_keys(node.right)]


def sequence_keys(node: Node | None) -> list[int]:
    """Keys in the order of their sequence positions."""
    return [key for key, _ in sorted(preorder(node), key=lambda pair: pair[1])]


def build_set_tree(values: Iterable[int]) -> Node | None:
    """A tree holding every value, all at position 0."""
    root = None
    for value in values:
        root = insert(root, value, 0)
    return root


def build_sequence_tree(pairs: Iterable[tuple[int, int]]) -> Node | None:
    """A tree built from ``(key, index)`` pairs."""
    root = None
    for key, index in pairs:
        root = insert(root, key, index)
    return root


def concatenate(a: Node | None, b: Node | None) -> Node | None:
    """A new tree holding ``a`` followed by ``b``, whose positions are shifted past ``a``."""
    first = list(preorder(a))
    second = list(preorder(b))
    result = build_sequence_tree(first)
    offset = len(first)
    for key, index in second:
        result = insert(result, key, offset + index)
    return result


def merge(a: Node | None, b: Node | None) -> Node | None:
    """The concatenation of ``a`` and ``b`` with each key kept once."""
    positions: dict[int, int] = {}
    for key, index in preorder(concatenate(a, b)):
        positions[key] = index
    return build_sequence_tree(positions.items())


def subst(a: Node | None, b: Node | None) -> Node | None:
    """Remove from ``a`` the keys that ``b`` also holds; ``a`` is modified."""
    keys_a = {key for key, _ in preorder(a)}
    for key, index in list(preorder(b)):
        if key in keys_a:
            a = remove(a, key, index)
    return a


def count(node: Node | None) -> Counter[int]:
    """How many times each key occurs in the tree."""
    return Counter(key for key, _ in preorder(node))


def intersection(p1: Node | None, p2: Node | None) -> Node | None:
    """A new tree of keys found at matching places while walking both trees."""
    if p1 is None or p2 is None:
        return None
    if p1.key == p2.key:
        node = Node(p1.key, p1.index)
        node.left = intersection(p1.left, p2.left)
        node.right = intersection(p1.right, p2.right)
        _update_height(node)
        return node
    if p1.key < p2.key:
        return intersection(p1.right, p2.left)
    return intersection(p1.left, p2.right)


def x_or(a: Node | None, b: Node | None) -> Node | None:
    """A tree of the keys that occur exactly once across ``a`` and ``b``."""
    result = None
    for key, times in count(concatenate(a, b)).items():
        if times == 1:
            result = insert(result, key, 0)
    return result


def operation(
    a: Node | None, b: Node | None, c: Node | None, d: Node | None, e: Node | None
) -> Node | None:
    """Compute ``A ∩ B ⊕ C ∩ D ∩ E``."""
    ab = intersection(a, b)
    cde = intersection(intersection(c, d), e)
    return x_or(ab, cde)


def sequence_operation(
    a: Node | None, b: Node | None
) -> tuple[list[int], list[int], list[int]]:
    """Concatenation, merge and substitution of two sequences, as key lists."""
    concatenated = sequence_keys(concatenate(a, b))
    merged = sequence_keys(merge(a, b))
    substituted = sequence_keys(subst(a, b))
    return concatenated, merged, substituted


def generate_set(
    size: int, min_val: int, max_val: int, rng: random.Random | None = None
) -> set[int]:
    """``size`` distinct random integers from ``min_val`` to ``max_val`` inclusive."""
    if min_val > max_val:
        raise ValueError("min_val must not exceed max_val")
    if size > max_val - min_val + 1:
        raise ValueError("range too small for the requested number of values")
    rng = rng or random.Random()
    values: set[int] = set()
    while len(values) < size:
        values.add(rng.randint(min_val, max_val))
    return values