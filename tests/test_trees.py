import pytest

from algobox.trees import (
    TreeNode,
    bst_delete,
    bst_insert,
    build_bst,
    build_level_order,
    find_level,
    inorder,
    is_bst,
    mirror,
    postorder,
    preorder,
    top_view,
)

VALUES = [50, 30, 70, 20, 40, 60, 80, 30, 65]


def test_build_level_order_empty():
    assert build_level_order([]) is None
    assert inorder(None) == []
    assert preorder(None) == []
    assert postorder(None) == []


def test_level_order_shape():
    root = build_level_order(range(1, 6))
    assert root.data == 1
    assert root.left.data == 2
    assert root.right.data == 3
    assert root.left.left.data == 4
    assert root.left.right.data == 5
    assert root.right.left is None


def test_level_order_preorder():
    root = build_level_order(range(1, 8))
    assert preorder(root) == [1, 2, 4, 5, 3, 6, 7]


def test_bst_inorder_sorted():
    assert inorder(build_bst(VALUES)) == sorted(set(VALUES))


def test_bst_insert_none_creates_root():
    root = bst_insert(None, 7)
    assert root.data == 7
    assert root.left is None and root.right is None


def test_bst_insert_duplicate_ignored():
    root = build_bst([2, 1, 3])
    assert bst_insert(root, 1) is root
    assert inorder(root) == [1, 2, 3]


@pytest.mark.parametrize("key", sorted(set(VALUES)))
def test_bst_delete_each(key):
    root = bst_delete(build_bst(VALUES), key)
    assert inorder(root) == [v for v in sorted(set(VALUES)) if v != key]
    assert is_bst(root)


def test_bst_delete_missing_key():
    root = build_bst(VALUES)
    assert inorder(bst_delete(root, 999)) == sorted(set(VALUES))


def test_bst_delete_only_node_and_empty():
    assert bst_delete(TreeNode(4), 4) is None
    assert bst_delete(None, 4) is None


def test_bst_delete_root_with_two_children():
    root = build_bst([5, 3, 8, 4, 2])
    root = bst_delete(root, 5)
    assert root.data == 8
    assert inorder(root) == [2, 3, 4, 8]


def test_is_bst():
    assert is_bst(None)
    assert is_bst(build_bst(VALUES))
    assert not is_bst(build_level_order([1, 2, 3]))


def test_is_bst_duplicates_left_only():
    assert is_bst(TreeNode(5, left=TreeNode(5)))
    assert not is_bst(TreeNode(5, right=TreeNode(5)))


def test_is_bst_checks_ancestors():
    root = TreeNode(10, left=TreeNode(5, right=TreeNode(12)))
    assert not is_bst(root)


def test_find_level():
    root = build_level_order(range(1, 8))
    assert find_level(root, 7) == 2
    assert find_level(root, 2) == find_level(root, 3) == find_level(root, 1) + 1
    assert find_level(root, 42) == -1
    assert find_level(None, 1) == -1


def test_find_level_uses_preorder():
    root = build_level_order([1, 2, 9, 9])
    assert find_level(root, 9) == find_level(root, 2) + 1


def test_mirror_reverses_inorder():
    root = build_bst(VALUES)
    expected = inorder(root)[::-1]
    assert mirror(root) is root
    assert inorder(root) == expected


def test_mirror_twice_restores():
    root = build_level_order(range(1, 10))
    before = preorder(root)
    mirror(mirror(root))
    assert preorder(root) == before
    assert mirror(None) is None


def test_top_view_complete_tree():
    assert top_view(build_level_order(range(1, 8))) == [1, 2, 3, 4, 7]


def test_top_view_left_chain():
    assert top_view(build_bst([5, 4, 3, 2, 1])) == [5, 4, 3, 2, 1]
    assert top_view(None) == []


def test_traversal_invariants():
    root = build_level_order(range(1, 12))
    pre, post, ino = preorder(root), postorder(root), inorder(root)
    assert pre[0] == root.data
    assert post[-1] == root.data
    assert sorted(pre) == sorted(post) == sorted(ino) == list(range(1, 12))


def test_deep_tree_traversal():
    root = build_bst(range(2000))
    assert inorder(root) == list(range(2000))
    assert preorder(root) == list(range(2000))
    assert postorder(root) == list(range(1999, -1, -1))