"""A plain binary tree whose nodes keep a link back to their parent."""

from __future__ import annotations

from typing import Optional


class Node:
    """A binary tree node holding an integer value."""

    __slots__ = ("value", "parent", "left", "right")

    def __init__(self, value: int, parent: Optional[Node] = None) -> None:
        self.value = value
        self.parent = parent
        self.left: Optional[Node] = None
        self.right: Optional[Node] = None

    def __repr__(self) -> str:
        parent = None if self.parent is None else self.parent.value
        return (
            f"Node(value={self.value!r}, parent={parent!r}, "
            f"left={self.left!r}, right={self.right!r})"
        )

    def add_left_child(self, value: int) -> Node:
        """Attach a new left child and return it."""
        self.left = Node(value, self)
        return self.left

    def add_right_child(self, value: int) -> Node:
        """Attach a new right child and return it."""
        self.right = Node(value, self)
        return self.right

    def copy(self) -> Node:
        """Return a shallow copy sharing the parent and children of this node."""
        clone = Node(self.value, self.parent)
        clone.left = self.left
        clone.right = self.right
        return clone

    @staticmethod
    def _values_match(first: Optional[Node], second: Optional[Node]) -> bool:
        if first is None and second is None:
            return True
        if first is None or second is None:
            return False
        return first.value == second.value

    def get_node_by_value(self, value: int) -> Optional[Node]:
        """Return a copy of the node holding ``value``.

        The search follows the left child whenever one exists and only falls
        back to the right child when there is no left child.
        """
        if self.value == value:
            return self.copy()
        if self.left is not None:
            return self.left.get_node_by_value(value)
        if self.right is not None:
            return self.right.get_node_by_value(value)
        return None

    def get_node_by_full_property(self, node: Node) -> Optional[Node]:
        """Return a copy of the node matching ``node`` by value, parent and children."""
        if (
            self.value == node.value
            and self._values_match(node.parent, self.parent)
            and self._values_match(node.left, self.left)
            and self._values_match(node.right, self.right)
        ):
            return self.copy()
        if self.left is not None:
            return self.left.get_node_by_full_property(node)
        if self.right is not None:
            return self.right.get_node_by_full_property(node)
        return None

    def discard_node_by_value(self, value: int) -> bool:
        """Cut off the subtree rooted at the node holding ``value``.

        Every node on the path taken drops the child it descended into.
        Returns whether a matching node was found.
        """
        if self.value == value:
            self.parent = None
            return True
        if self.left is not None:
            found = self.left.discard_node_by_value(value)
            self.left = None
            return found
        if self.right is not None:
            found = self.right.discard_node_by_value(value)
            self.right = None
            return found
        return False

    def count_nodes(self) -> int:
        """Return the number of nodes in the subtree rooted here."""
        return Node.count_nodes_by_nodelink(self, 0)

    @staticmethod
    def count_nodes_by_nodelink(node: Node, count: int) -> int:
        """Count the nodes under ``node``, starting from ``count``."""
        left_count = 0
        right_count = 0
        if node.left is not None:
            left_count = Node.count_nodes_by_nodelink(node.left, count)
        if node.right is not None:
            right_count = Node.count_nodes_by_nodelink(node.right, count)
        return count + left_count + right_count + 1

    def tree_depth(self) -> int:
        """Return the length of the longest path down from this node (a leaf is 0)."""
        left_depth = self.left.tree_depth() + 1 if self.left is not None else 0
        right_depth = self.right.tree_depth() + 1 if self.right is not None else 0
        return max(left_depth, right_depth)

    def get_sibling(self) -> Optional[Node]:
        """Return the other child of this node's parent, if any."""
        parent = self.parent
        if parent is None:
            return None
        if parent.left is not None and parent.left.value == self.value:
            return parent.right
        return parent.left