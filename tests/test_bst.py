import pytest

from coursekit.bst import BinarySearchTree, TraversalOrder


def test_copy_matches_original():
    t1 = BinarySearchTree()
    for value in (2, 1, 4, 3):
        t1.insert(value)
    t2 = t1.copy()
    assert len(t1) == len(t2)
    assert list(t1) == list(t2)
    t2.insert(10)
    assert 10 not in t1


def test_insert_returns_value_and_counts():
    tree = BinarySearchTree()
    assert tree.insert(2) == 2
    assert tree.insert(1) == 1
    assert tree.insert(3) == 3
    assert len(tree) == 3
    assert tree.front() == 1
    assert tree.back() == 3


def test_insert_duplicate_ignored():
    tree = BinarySearchTree([2, 1, 2])
    assert len(tree) == 2
    assert list(tree) == [1, 2]


def test_forward_and_reverse_iteration():
    tree = BinarySearchTree([2, 1, 3])
    assert list(tree) == [1, 2, 3]
    assert list(reversed(tree)) == [3, 2, 1]


def test_find():
    tree = BinarySearchTree()
    for n in range(10):
        tree.insert(n)
        assert tree.find(n) == n


def test_find_missing_raises():
    tree = BinarySearchTree([1, 2])
    with pytest.raises(KeyError):
        tree.find(5)


@pytest.mark.parametrize(
    "order",
    [
        [5, 4, 6, 3, 7, 2, 8, 1, 9],
        [5, 3, 7, 2, 4, 6, 8, 1, 9],
    ],
)
def test_erase(order):
    tree = BinarySearchTree(order)
    old_size = len(tree)
    tree.erase(3)
    assert old_size == len(tree) + 1
    assert list(tree) == [1, 2, 4, 5, 6, 7, 8, 9]


def test_erase_root_with_only_left_child():
    tree = BinarySearchTree([5, 3, 1])
    tree.erase(5)
    assert list(tree) == [1, 3]


def test_erase_missing_is_noop():
    tree = BinarySearchTree([1, 2])
    tree.erase(7)
    assert list(tree) == [1, 2]


def test_output_orders():
    tree = BinarySearchTree([3, 1, 2, 4])
    assert tree.output(TraversalOrder.LRT) == [2, 1, 4, 3]
    assert tree.output(TraversalOrder.TLR) == [3, 1, 2, 4]
    assert tree.output(TraversalOrder.LTR) == [1, 2, 3, 4]


def test_index_of():
    tree = BinarySearchTree([5, 3, 7, 2, 4, 6, 8, 1, 9])
    for item in tree:
        assert tree.index_of(item) + 1 == item


def test_index_of_missing_raises():
    tree = BinarySearchTree([1])
    with pytest.raises(KeyError):
        tree.index_of(2)


def test_count_more_than():
    tree = BinarySearchTree([2, 1, 3, 4])
    assert tree.count_more_than(2) == 2


def test_balance_factor():
    tree = BinarySearchTree([2, 1, 3, 4, 5])
    assert tree.balance_factor() == 2
    assert BinarySearchTree().balance_factor() == 0


def test_greater_to_root():
    tree = BinarySearchTree([5, 3, 7])
    assert tree.greater_to_root(5) == 7
    assert tree.output(TraversalOrder.TLR) == [7, 5, 3]
    assert list(tree) == [3, 5, 7]
    assert tree.greater_to_root(7) is None
    assert tree.greater_to_root(42) is None


def test_merge_and_clear():
    tree = BinarySearchTree([1, 3])
    tree.merge(BinarySearchTree([2, 3, 4]))
    assert list(tree) == [1, 2, 3, 4]
    tree.clear()
    assert len(tree) == 0
    assert list(tree) == []


def test_front_back_empty_raise():
    tree = BinarySearchTree()
    with pytest.raises(IndexError):
        tree.front()
    with pytest.raises(IndexError):
        tree.back()