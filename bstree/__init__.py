"""Binary trees and binary search trees with parent links, plus Graphviz dot export."""

__version__ = "0.1.0"
__all__ = ["bst", "cli", "dotfile", "tree"]