"""Render binary trees as Graphviz ``graph`` documents."""

from __future__ import annotations

import os
from typing import Callable, Iterator, Optional, TypeVar, Union

from bstree.bst import BstNode
from bstree.tree import Node

_PREAMBLE = "graph tree{\n"
_EPILOGUE = "}"

T = TypeVar("T", Node, BstNode)
PathLike = Union[str, "os.PathLike[str]"]


def _edge_lines(node: T, label: Callable[[T], int]) -> Iterator[str]:
    """Yield one edge line per child, each node's edges before its subtrees."""
    children = [child for child in (node.left, node.right) if child is not None]
    for child in children:
        yield f"\t{label(node)}--{label(child)};\n"
    for child in children:
        yield from _edge_lines(child, label)


def _render(root: T, label: Callable[[T], int]) -> str:
    return _PREAMBLE + "".join(_edge_lines(root, label)) + _EPILOGUE


def _write(text: str, output_path: PathLike) -> None:
    with open(output_path, "w", encoding="utf-8", newline="\n") as handle:
        handle.write(text)


def tree_to_dot(root: Node) -> str:
    """Return the dot text for a plain binary tree rooted at ``root``."""
    return _render(root, lambda node: node.value)


def bst_to_dot(root: BstNode) -> str:
    """Return the dot text for a binary search tree rooted at ``root``."""
    return _render(root, lambda node: node.key)


def generate_dotfile(root: Node, output_path: PathLike) -> None:
    """Write the dot text of a plain binary tree to ``output_path``."""
    _write(tree_to_dot(root), output_path)


def generate_dotfile_bst(root: BstNode, output_path: PathLike) -> None:
    """Write the dot text of a binary search tree to ``output_path``."""
    _write(bst_to_dot(root), output_path)


def _unused(_: Optional[object] = None) -> None:  # pragma: no cover
    return None