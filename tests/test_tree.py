import io
import random

import pytest

from dsakit.tree import (
    Node,
    build_level_order,
    build_preorder,
    build_tree,
    diameter,
    inorder,
    level_order,
    main,
    max_depth,
    postorder,
    preorder,
    zigzag,
)


def _bst(values):
    root = None
    for value in values:
        if root is None:
            root = Node(value)
            continue
        node = root
        while True:
            if value < node.data:
                if node.left is None:
                    node.left = Node(value)
                    break
                node = node.left
            else:
                if node.right is None:
                    node.right = Node(value)
                    break
                node = node.right
    return root


def _left_chain(values):
    root = None
    for value in reversed(values):
        root = Node(value, left=root)
    return root


def _count(node):
    if node is None:
        return 0
    return 1 + _count(node.left) + _count(node.right)


def test_build_tree_matches_hand_built_nodes():
    assert build_tree("1 2 3 N 5") == Node(1, Node(2, None, Node(5)), Node(3))


def test_build_tree_empty_and_missing_root():
    assert build_tree("") is None
    assert build_tree("N 1 2") is None


def test_build_tree_stops_when_tokens_run_out():
    assert build_tree("7 8") == Node(7, Node(8))


def test_build_tree_rejects_bad_token():
    with pytest.raises(ValueError):
        build_tree("1 x 2")


def test_build_preorder_matches_structure():
    values = [1, 2, -1, -1, 3, -1, -1]
    assert build_preorder(values) == Node(1, Node(2), Node(3))


def test_build_preorder_null_root():
    assert build_preorder([-1]) is None


def test_build_preorder_runs_out():
    with pytest.raises(ValueError):
        build_preorder([1, 2])


def test_build_preorder_round_trip_with_preorder():
    values = [5, 4, -1, -1, 9, 8, -1, -1, -1]
    assert preorder(build_preorder(values)) == [v for v in values if v != -1]


def test_build_level_order_matches_text_builder():
    assert build_level_order([1, 2, 3, -1, 5, -1, -1, -1, -1]) == build_tree("1 2 3 N 5")


def test_build_level_order_runs_out():
    with pytest.raises(ValueError):
        build_level_order([1, 2])
    with pytest.raises(ValueError):
        build_level_order([])


def test_level_order_flattened_preserves_text_order():
    root = build_tree("10 20 30 40 50 60 70")
    flat = [value for level in level_order(root) for value in level]
    assert flat == [10, 20, 30, 40, 50, 60, 70]


def test_level_order_empty():
    assert level_order(None) == []


def test_inorder_of_bst_is_sorted():
    values = random.Random(3).sample(range(1000), 50)
    assert inorder(_bst(values)) == sorted(values)


def test_traversals_are_permutations():
    values = random.Random(7).sample(range(500), 40)
    root = _bst(values)
    for traversal in (inorder, preorder, postorder):
        assert sorted(traversal(root)) == sorted(values)


def test_traversals_on_left_chain():
    values = [4, 8, 15, 16, 23]
    root = _left_chain(values)
    assert preorder(root) == values
    assert postorder(root) == values[::-1]
    assert inorder(root) == values[::-1]


def test_preorder_starts_and_postorder_ends_with_root():
    root = build_tree("9 3 12 1 5")
    assert preorder(root)[0] == 9
    assert postorder(root)[-1] == 9


def test_traversals_of_empty_tree():
    assert inorder(None) == preorder(None) == postorder(None) == []


def test_max_depth_of_chain_is_length():
    values = list(range(12))
    assert max_depth(_left_chain(values)) == len(values)
    assert max_depth(None) == 0


def test_max_depth_equals_level_count():
    root = _bst(random.Random(11).sample(range(300), 60))
    assert max_depth(root) == len(level_order(root))


def test_diameter_single_and_empty():
    assert diameter(None) == 0
    assert diameter(Node(42)) == 1


def test_diameter_of_chain_is_length():
    values = list(range(9))
    assert diameter(_left_chain(values)) == len(values)


def test_diameter_bounds():
    root = _bst(random.Random(5).sample(range(300), 80))
    assert max_depth(root) <= diameter(root) <= _count(root)


def test_diameter_not_through_root():
    deep = Node(2, _left_chain([3, 4, 5]), _left_chain([6, 7, 8]))
    root = Node(1, deep)
    assert diameter(root) == 7


def test_zigzag_first_element_is_root_and_is_permutation():
    root = _bst(random.Random(13).sample(range(400), 30))
    result = zigzag(root)
    assert result[0] == root.data
    assert sorted(result) == sorted(inorder(root))


def test_zigzag_alternates_levels():
    root = build_tree("1 2 3 4 5 6 7")
    levels = level_order(root)
    result = zigzag(root)
    assert result[1:3] == levels[1][::-1]
    assert result[3:] == levels[2]


def test_zigzag_empty():
    assert zigzag(None) == []


def test_main_prints_each_case(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n1 2 3\nN\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == "1 3 2 \n\n"