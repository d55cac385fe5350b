# bstree

Small tree data structures for Python, with Graphviz export:

- `bstree.tree.Node` is a plain binary tree node with an integer `value` and a
  link back to its `parent`. It offers `add_left_child`, `add_right_child`,
  `copy`, `get_node_by_value`, `get_node_by_full_property`,
  `discard_node_by_value`, `count_nodes`, `Node.count_nodes_by_nodelink`,
  `tree_depth` and `get_sibling`.
- `bstree.bst.BstNode` is a binary search tree node with an integer `key`. It
  offers `tree_search`, `minimum`, `maximum`, `get_root`, `tree_successor`,
  `tree_successor_simpler`, `tree_predecessor`, `median`, `tree_delete`,
  `add_node` and the child-adding methods. `bstree.bst.tree_insert` inserts a
  key and returns the root of the tree.
- `bstree.dotfile` renders either kind of tree as an undirected Graphviz graph:
  `tree_to_dot` and `bst_to_dot` return the text, `generate_dotfile` and
  `generate_dotfile_bst` write it to a file.

## Installation

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Library use

```python
from bstree.bst import tree_insert
from bstree.dotfile import bst_to_dot, generate_dotfile_bst

root = None
for key in [15, 6, 18, 3, 7, 17, 20, 2, 4, 13, 9]:
    root = tree_insert(root, key)

print(root.minimum().key)      # 2
print(root.maximum().key)      # 20
print(root.median().key)

found = root.tree_search(13)
if found is not None:
    print(found.key)           # 13

print(bst_to_dot(root))
generate_dotfile_bst(root, "bst.dot")
```

A plain binary tree:

```python
from bstree.tree import Node

root = Node(5)
root.add_left_child(3)
root.add_right_child(7)
print(root.count_nodes())   # 3
print(root.tree_depth())    # 1
```

### Points to know

- `tree_search`, `minimum`, `maximum` and `Node.get_node_by_value` return
  shallow copies of the found node: the copy shares its parent and children
  with the original, but the original's parent does not point at the copy.
  `tree_predecessor` matches ancestors by identity, so call it on a node that
  is linked into the tree, not on such a copy.
- `Node.get_node_by_value` and `Node.get_node_by_full_property` descend into
  the left child whenever there is one, and only try the right child when
  there is no left child.
- `Node.discard_node_by_value` cuts off the matching subtree, and every node on
  the path taken drops the child it descended into. It returns whether a match
  was found.
- `BstNode.tree_delete` raises `ValueError` on a node with no children;
  `BstNode.tree_successor_simpler` raises `ValueError` when its walk needs a
  parent that does not exist.
- `BstNode.add_node` fills the left slot first, then the right one, and
  returns `False` (printing a message) when both are taken.

## Command line

```
bstree
```

This builds a sample binary search tree and prints the results of searches,
minimum, maximum, root lookup, successors, median and predecessor. It writes
the Graphviz files `bst_graph.dot`, `bst.dot`, `bst_delete_root.dot` and
`UTS.dot`.

Options:

- `-o DIR`, `--output-dir DIR`: directory that receives the dot files
  (created if missing; default: the current directory).
- `--binary-tree`: also run the plain binary tree walkthrough first, which
  prints depth and node counts and writes `prime.dot`, `prime_t2.dot`,
  `prime_t3.dot` and `prime_t4.dot`.

The same walkthroughs are available from Python as
`bstree.cli.demo_binary_search_tree` and `bstree.cli.demo_binary_tree`, and
`bstree.cli.build_sample_bst` returns the sample tree.

## What it does not do

The package only writes `.dot` text. It does not draw images; turn the files
into pictures with Graphviz itself, for example `dot -Tpng bst.dot -o bst.png`.
Trees live in memory only and are not saved or loaded in any other form.