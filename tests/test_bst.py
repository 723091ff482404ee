import random

from algonotes.bst import BSTNode, build_bst, inorder, insert, to_min_heap


def _nodes(root):
    stack = [root] if root else []
    while stack:
        node = stack.pop()
        yield node
        stack.extend(child for child in (node.left, node.right) if child)


def test_inorder_is_sorted():
    values = [10, 5, 15, 3, 7, 12, 20]
    assert inorder(build_bst(values)) == sorted(values)


def test_insert_places_by_comparison():
    root = insert(None, 10)
    insert(root, 5)
    insert(root, 15)
    insert(root, 10)
    assert root.left.data == 5
    assert root.right.data == 15
    assert root.left.right.data == 10


def test_empty_tree():
    assert build_bst([]) is None
    assert inorder(None) == []
    assert to_min_heap(None) is None


def test_to_min_heap_property():
    rng = random.Random(5)
    values = rng.sample(range(1000), 30)
    root = to_min_heap(build_bst(values))
    for node in _nodes(root):
        for child in (node.left, node.right):
            if child is not None:
                assert node.data < child.data
    assert sorted(node.data for node in _nodes(root)) == sorted(values)


def test_to_min_heap_left_smaller_than_right():
    root = to_min_heap(build_bst([4, 2, 6, 1, 3, 5, 7]))
    left = [n.data for n in _nodes(root.left)]
    right = [n.data for n in _nodes(root.right)]
    assert max(left) < min(right)
    assert root.data == 1


def test_to_min_heap_keeps_shape():
    root = build_bst([2, 1, 3])
    left, right = root.left, root.right
    result = to_min_heap(root)
    assert result is root
    assert root.left is left and root.right is right
    assert isinstance(root, BSTNode)
    assert [root.data, left.data, right.data] == [1, 2, 3]