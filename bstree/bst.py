"""Binary search tree nodes with parent links and the classic tree operations."""

from __future__ import annotations

from typing import Optional


def _keys_match(first: Optional[BstNode], second: Optional[BstNode]) -> bool:
    """Compare two optional nodes by key only."""
    if first is None and second is None:
        return True
    if first is None or second is None:
        return False
    return first.key == second.key


def _is_nil(node: Optional[BstNode]) -> bool:
    """True unless ``node`` exists and has a parent and both children."""
    if node is None:
        return True
    return node.parent is None or node.left is None or node.right is None


class BstNode:
    """A binary search tree node holding an integer key."""

    __slots__ = ("key", "parent", "left", "right")

    def __init__(self, key: int, parent: Optional[BstNode] = None) -> None:
        self.key = key
        self.parent = parent
        self.left: Optional[BstNode] = None
        self.right: Optional[BstNode] = None

    def __repr__(self) -> str:
        parent = None if self.parent is None else self.parent.key
        return (
            f"BstNode(key={self.key!r}, parent={parent!r}, "
            f"left={self.left!r}, right={self.right!r})"
        )

    def add_left_child(self, value: int) -> BstNode:
        """Attach a new left child and return it."""
        self.left = BstNode(value, self)
        return self.left

    def add_right_child(self, value: int) -> BstNode:
        """Attach a new right child and return it."""
        self.right = BstNode(value, self)
        return self.right

    def copy(self) -> BstNode:
        """Return a shallow copy sharing the parent and children of this node."""
        clone = BstNode(self.key, self.parent)
        clone.left = self.left
        clone.right = self.right
        return clone

    @staticmethod
    def _transplant(u: BstNode, v: BstNode) -> BstNode:
        """Put ``v`` in the place ``u`` holds under its parent and return ``v``."""
        parent = u.parent
        if parent is not None:
            if parent.left is None:
                raise ValueError(f"parent of node {u.key} has no left child")
            if parent.left.key == u.key:
                parent.left = v
            else:
                parent.right = v
            v.parent = parent
        return v

    def tree_delete(self) -> BstNode:
        """Remove this node from its tree and return the node that replaces it."""
        if self.right is None:
            if self.left is None:
                raise ValueError(f"node {self.key} has no child to replace it")
            return self._transplant(self, self.left)
        if self.left is None:
            return self._transplant(self, self.right)

        min_node = self.right.minimum()
        min_parent = min_node.parent
        if not _keys_match(min_parent, self):
            if min_node.right is not None:
                min_node = self._transplant(min_node, min_node.right)
            else:
                min_parent.left = None
            self.right.parent = min_node
            min_node.right = self.right

        replacement = self._transplant(self, min_node)
        self.left.parent = replacement
        replacement.left = self.left
        self.right.parent = replacement
        replacement.right = self.right
        return replacement

    def tree_search(self, value: int) -> Optional[BstNode]:
        """Return a copy of the node holding ``value``, or None.

        When ``value`` is smaller than the key but there is no left child,
        the search goes on in the right subtree.
        """
        if self.key == value:
            return self.copy()
        if value < self.key and self.left is not None:
            return self.left.tree_search(value)
        if self.right is not None:
            return self.right.tree_search(value)
        return None

    def minimum(self) -> BstNode:
        """Return a copy of the leftmost node of this subtree."""
        node = self
        while node.left is not None:
            node = node.left
        return node.copy()

    def maximum(self) -> BstNode:
        """Return a copy of the rightmost node of this subtree."""
        node = self
        while node.right is not None:
            node = node.right
        return node.copy()

    def get_root(self) -> BstNode:
        """Follow parent links up and return the topmost node."""
        node = self
        while node.parent is not None:
            node = node.parent
        return node

    def tree_successor(self) -> Optional[BstNode]:
        """Return the node with the next larger key, or None for the largest."""
        if self.right is not None:
            return self.right.minimum()
        child: BstNode = self
        ancestor = self.parent
        while ancestor is not None:
            if ancestor.left is not None and ancestor.left.key == child.key:
                return ancestor
            child = ancestor
            ancestor = ancestor.parent
        return None

    def tree_successor_simpler(self) -> Optional[BstNode]:
        """Successor search that relies on the nil test of nodes.

        A right child only counts when it has a parent and both children.
        Raises ValueError when the walk needs a parent that does not exist.
        """
        right = self.right
        if not _is_nil(right):
            return right.minimum()

        ancestor = self.parent
        if ancestor is None:
            raise ValueError(f"node {self.key} has no parent")
        ancestor_right = ancestor.right
        current: BstNode = self
        while _is_nil(ancestor) and _keys_match(current, ancestor_right):
            if ancestor.parent is None:
                raise ValueError(f"node {ancestor.key} has no parent")
            current, ancestor = ancestor, ancestor.parent

        if ancestor.key == current.get_root().key:
            return None
        return ancestor

    def add_node(self, value: int) -> bool:
        """Attach ``value`` in the first free child slot, left first."""
        if self.left is None:
            self.add_left_child(value)
            return True
        if self.right is None:
            self.add_right_child(value)
            return True
        print("Node already has two children")
        return False

    def median(self) -> BstNode:
        """Return the node in the middle of the in-order walk of the tree."""
        current = self.minimum()
        count = 1
        walker = current
        while (successor := walker.tree_successor()) is not None:
            count += 1
            walker = successor

        for _ in range(count // 2):
            successor = current.tree_successor()
            if successor is None:
                raise RuntimeError("Expected successor during median walk")
            current = successor
        return current

    def tree_predecessor(self) -> Optional[BstNode]:
        """Return the node with the next smaller key, or None for the smallest.

        Ancestors are matched by identity, so this needs a node that is
        actually linked into the tree.
        """
        if self.left is not None:
            node = self.left
            while node.right is not None:
                node = node.right
            return node

        current: BstNode = self
        parent = self.parent
        while parent is not None:
            if parent.right is current:
                return parent
            current = parent
            parent = parent.parent
        return None


def tree_insert(node: Optional[BstNode], key: int) -> BstNode:
    """Insert ``key`` below ``node`` and return the root of the tree.

    With no node a new single-node tree is returned.
    """
    if node is None:
        return BstNode(key)
    current = node
    while True:
        if current.key < key:
            if current.right is None:
                current.add_right_child(key)
                break
            current = current.right
        else:
            if current.left is None:
                current.add_left_child(key)
                break
            current = current.left
    return current.get_root()