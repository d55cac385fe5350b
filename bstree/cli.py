"""Command that exercises the tree types and writes their dot files."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence, TextIO, Union

from bstree.bst import BstNode, tree_insert
from bstree.dotfile import generate_dotfile, generate_dotfile_bst
from bstree.tree import Node

PathArg = Union[str, Path]

_INSERT_KEYS = [6, 18, 3, 7, 17, 20, 2, 4, 13, 9]
_SEARCH_KEYS = [15, 9, 22]
_SUCCESSOR_KEYS = [2, 20, 15, 13, 9, 7, 22]


def build_sample_bst() -> BstNode:
    """Build the sample search tree by linking children directly."""
    root = BstNode(15)
    six = root.add_left_child(6)
    eighteen = root.add_right_child(18)
    eighteen.add_left_child(17)
    eighteen.add_right_child(20)
    three = six.add_left_child(3)
    seven = six.add_right_child(7)
    three.add_left_child(2)
    three.add_right_child(4)
    thirteen = seven.add_right_child(13)
    thirteen.add_left_child(9)
    return root


def demo_binary_search_tree(
    out_dir: PathArg = ".", out: Optional[TextIO] = None
) -> BstNode:
    """Run the search tree walkthrough, print results and write dot files.

    Returns the root of the sample tree after the walkthrough changed it.
    """
    out = sys.stdout if out is None else out
    directory = Path(out_dir)
    root = build_sample_bst()

    generate_dotfile_bst(root, directory / "bst_graph.dot")

    for key in _SEARCH_KEYS:
        found = root.tree_search(key)
        result = "not found" if found is None else f"found -> {found.key}"
        print(f"tree search result of key {key} is {result}", file=out)

    min_node = root.minimum()
    print(f"minimum result {min_node.key}", file=out)
    max_node = root.maximum()
    print(f"maximum result {max_node.key}", file=out)
    print(f"root node {max_node.get_root().key}", file=out)

    for key in _SUCCESSOR_KEYS:
        node = root.tree_search(key)
        if node is None:
            print(
                f"node with key of {key} does not exist, failed to get successor",
                file=out,
            )
            continue
        successor = node.tree_successor_simpler()
        result = "not found" if successor is None else str(successor.key)
        print(f"successor of node ({key}) is {result}", file=out)

    inserted = tree_insert(None, 15)
    for key in _INSERT_KEYS:
        inserted = tree_insert(inserted, key)
    generate_dotfile_bst(inserted, directory / "bst.dot")
    replacement = inserted.tree_delete()
    generate_dotfile_bst(replacement, directory / "bst_delete_root.dot")

    twenty = root.right.right
    twenty.add_node(19)
    twenty.add_node(21)
    generate_dotfile_bst(root, directory / "UTS.dot")

    median = root.median()
    print(f"\nMID TEST\nThe median is: {median.key}", file=out)

    predecessor = twenty.tree_predecessor()
    if predecessor is None:
        print("No predecessor (this is the minimum node)", file=out)
    else:
        print(f"Predecessor key: {predecessor.key}", file=out)
    return root


def demo_binary_tree(out_dir: PathArg = ".", out: Optional[TextIO] = None) -> Node:
    """Run the plain binary tree walkthrough, print results and write dot files.

    Returns the root of the original tree.
    """
    out = sys.stdout if out is None else out
    directory = Path(out_dir)

    root = Node(5)
    root.add_left_child(3)
    root.add_right_child(7)
    generate_dotfile(root, directory / "prime.dot")

    left = root.left
    left.add_left_child(2)
    left.add_right_child(4)
    right = root.right
    right.add_right_child(10)
    generate_dotfile(root, directory / "prime_t2.dot")

    print(f"Current tree depth: {root.tree_depth()}", file=out)
    print(f"Amount of nodes in current tree: {root.count_nodes()}", file=out)
    subtree_count = Node.count_nodes_by_nodelink(right, 0)
    print(f"Amount of nodes in current subtree: {subtree_count}", file=out)

    left.get_sibling()

    by_value = root.get_node_by_value(3)
    print(f"left subtree seek by value {by_value!r}", file=out)
    by_property = root.get_node_by_full_property(by_value)
    print(f"left subtree seek by full property {by_property!r}", file=out)

    copy = root.copy()
    flag = copy.discard_node_by_value(3)
    print(f"status of node deletion: {str(flag).lower()}", file=out)
    generate_dotfile(copy, directory / "prime_t3.dot")

    print(f"Depth after discard {copy.tree_depth()}", file=out)
    print(f"Count nodes after discard {copy.count_nodes()}", file=out)

    generate_dotfile(root, directory / "prime_t4.dot")
    return root


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point of the command."""
    parser = argparse.ArgumentParser(
        prog="bstree",
        description="Exercise binary tree operations and write Graphviz files.",
    )
    parser.add_argument(
        "-o",
        "--output-dir",
        default=".",
        help="directory that receives the dot files (default: current directory)",
    )
    parser.add_argument(
        "--binary-tree",
        action="store_true",
        help="also run the plain binary tree walkthrough",
    )
    args = parser.parse_args(argv)

    directory = Path(args.output_dir)
    directory.mkdir(parents=True, exist_ok=True)
    if args.binary_tree:
        demo_binary_tree(directory)
    demo_binary_search_tree(directory)
    return 0


if __name__ == "__main__":
    sys.exit(main())