import pytest

from bstree.bst import BstNode, tree_insert


def build_sample():
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


SAMPLE_KEYS = [15, 6, 18, 3, 7, 17, 20, 2, 4, 13, 9]


def inorder(node):
    if node is None:
        return []
    return inorder(node.left) + [node.key] + inorder(node.right)


def find(root, key):
    node = root
    while node is not None and node.key != key:
        node = node.left if key < node.key else node.right
    return node


def test_children_link_back_to_parent():
    root = BstNode(10)
    child = root.add_left_child(5)
    assert root.left is child
    assert child.parent is root
    assert child.key == 5


def test_copy_shares_links():
    root = build_sample()
    six = root.left
    clone = six.copy()
    assert clone is not six
    assert clone.key == 6
    assert clone.parent is root
    assert clone.left is six.left
    assert clone.right is six.right


@pytest.mark.parametrize("key", [15, 9, 2, 20, 13])
def test_tree_search_finds_existing(key):
    root = build_sample()
    result = root.tree_search(key)
    assert result.key == key
    assert result is not find(root, key)


def test_tree_search_missing_key():
    assert build_sample().tree_search(22) is None


def test_tree_search_goes_right_without_left_child():
    root = BstNode(10)
    root.add_right_child(5)
    assert root.tree_search(5).key == 5


def test_minimum_and_maximum():
    root = build_sample()
    assert root.minimum().key == 2
    assert root.maximum().key == 20


def test_get_root_from_maximum_copy():
    root = build_sample()
    assert root.maximum().get_root() is root
    assert root.get_root() is root


@pytest.mark.parametrize(
    "key, expected",
    [(2, 3), (20, 18), (15, 17), (13, 6), (9, 13), (7, 6)],
)
def test_tree_successor_simpler(key, expected):
    root = build_sample()
    node = root.tree_search(key)
    assert node.tree_successor_simpler().key == expected


def test_tree_successor_simpler_root_result_is_none():
    root = build_sample()
    assert root.tree_search(6).tree_successor_simpler() is None


def test_tree_successor_simpler_without_parent_raises():
    root = BstNode(5)
    root.add_right_child(8)
    with pytest.raises(ValueError):
        root.tree_successor_simpler()


def test_tree_successor_walks_in_order():
    root = build_sample()
    node = root.minimum()
    keys = [node.key]
    while (node := node.tree_successor()) is not None:
        keys.append(node.key)
    assert keys == sorted(SAMPLE_KEYS)


def test_tree_successor_of_maximum_is_none():
    root = build_sample()
    assert root.maximum().tree_successor() is None


def test_tree_insert_none_creates_tree():
    node = tree_insert(None, 15)
    assert node.key == 15
    assert node.parent is None
    assert node.left is None and node.right is None


def test_tree_insert_builds_search_tree():
    root = tree_insert(None, 15)
    for key in SAMPLE_KEYS[1:]:
        result = tree_insert(root, key)
        assert result is root
    assert inorder(root) == sorted(SAMPLE_KEYS)
    assert inorder(build_sample()) == inorder(root)


def test_tree_insert_equal_key_goes_left():
    root = tree_insert(None, 5)
    tree_insert(root, 5)
    assert root.left.key == 5
    assert root.right is None


def test_tree_delete_root_with_two_children():
    root = tree_insert(None, 15)
    for key in SAMPLE_KEYS[1:]:
        tree_insert(root, key)
    replacement = root.tree_delete()
    assert replacement.key == 17
    assert replacement.left.key == 6
    assert replacement.right.key == 18
    assert replacement.left.parent is replacement
    assert replacement.right.parent is replacement
    expected = sorted(SAMPLE_KEYS)
    expected.remove(15)
    assert inorder(replacement) == expected


def test_tree_delete_node_with_only_right_child():
    root = BstNode(10)
    left = root.add_left_child(5)
    left.add_right_child(7)
    replacement = left.tree_delete()
    assert replacement.key == 7
    assert root.left is replacement
    assert replacement.parent is root


def test_tree_delete_leaf_raises():
    root = build_sample()
    two = find(root, 2)
    with pytest.raises(ValueError):
        two.tree_delete()
    assert find(root, 3).left is two
    assert inorder(root) == sorted(SAMPLE_KEYS)


def test_add_node_fills_left_then_right(capsys):
    node = BstNode(20)
    assert node.add_node(19) is True
    assert node.add_node(21) is True
    assert node.left.key == 19
    assert node.right.key == 21
    assert node.left.parent is node
    assert node.add_node(22) is False
    assert "Node already has two children" in capsys.readouterr().out


def test_median_of_sample():
    root = build_sample()
    keys = sorted(SAMPLE_KEYS)
    assert root.median().key == keys[len(keys) // 2]


def test_median_after_adding_nodes():
    root = build_sample()
    twenty = root.right.right
    twenty.add_node(19)
    twenty.add_node(21)
    assert root.median().key == 13


def test_median_single_node():
    assert BstNode(4).median().key == 4


def test_tree_predecessor_from_left_subtree():
    root = build_sample()
    twenty = root.right.right
    twenty.add_node(19)
    twenty.add_node(21)
    assert twenty.tree_predecessor() is twenty.left


def test_tree_predecessor_through_ancestors():
    root = build_sample()
    seventeen = find(root, 17)
    assert seventeen.tree_predecessor() is root


def test_tree_predecessor_of_minimum_is_none():
    root = build_sample()
    assert find(root, 2).tree_predecessor() is None


def test_tree_predecessor_walks_in_reverse_order():
    root = build_sample()
    node = find(root, 20)
    keys = [node.key]
    while (node := node.tree_predecessor()) is not None:
        keys.append(node.key)
    assert keys == sorted(SAMPLE_KEYS, reverse=True)