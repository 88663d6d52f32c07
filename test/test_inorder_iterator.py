import pytest
from hypothesis import given, strategies as st

from inorder_iterator import EmptyIteration, InOrderIterator, TreeModifiedError
from ordered_tree import OrderedTree


def drain(iterator):
    values = []
    while iterator.has_more():
        values.append(iterator.advance())
    return values


def test_yields_sorted_values():
    tree = OrderedTree([5, 3, 8, 1, 4, 7, 9])
    assert drain(tree.create_iterator()) == [1, 3, 4, 5, 7, 8, 9]


def test_starts_at_leftmost_node():
    iterator = OrderedTree([5, 3, 8, 1, 4]).create_iterator()
    assert iterator.value == 1
    assert [node.value for node in iterator.pending] == [5, 3]


def test_descending_degenerate_tree():
    tree = OrderedTree(range(3000, 0, -1))
    iterator = tree.create_iterator()
    assert iterator.value == 1
    assert drain(iterator) == list(range(1, 3001))
    assert iterator == tree.end()


def test_keeps_duplicates():
    tree = OrderedTree([2, 2, 2])
    assert drain(tree.create_iterator()) == [2, 2, 2]


def test_equal_values_keep_insertion_order():
    class Item:
        def __init__(self, key, tag):
            self.key = key
            self.tag = tag

        def __lt__(self, other):
            return self.key < other.key

    tree = OrderedTree([Item(2, 'a'), Item(1, 'x'), Item(2, 'b'), Item(2, 'c')])
    assert [item.tag for item in tree] == ['x', 'a', 'b', 'c']


def test_empty_tree():
    iterator = OrderedTree().create_iterator()
    assert not iterator.has_more()
    with pytest.raises(EmptyIteration):
        iterator.advance()


def test_advance_after_exhaustion_fails():
    iterator = OrderedTree([1, 2]).create_iterator()
    assert drain(iterator) == [1, 2]
    assert not iterator.has_more()
    with pytest.raises(EmptyIteration):
        iterator.advance()
    with pytest.raises(EmptyIteration):
        iterator.value


def test_has_more_does_not_advance():
    iterator = OrderedTree([2, 1]).create_iterator()
    assert iterator.has_more()
    assert iterator.has_more()
    assert iterator.advance() == 1


def test_python_iteration():
    tree = OrderedTree([3, 1, 2])
    assert list(tree) == [1, 2, 3]
    iterator = iter(tree)
    assert next(iterator) == 1
    assert list(iterator) == [2, 3]
    assert list(iterator) == []


def test_cursor_loop():
    tree = OrderedTree([5, 3, 8, 1, 4, 7, 9])
    values = []
    it = tree.begin()
    while it != tree.end():
        values.append(it.value)
        it.step()
    assert values == [1, 3, 4, 5, 7, 8, 9]
    assert it == tree.end()


def test_equality_compares_full_state():
    tree = OrderedTree([2, 1, 3])
    first = tree.begin()
    second = tree.begin()
    assert first == second
    first.step()
    assert first != second
    second.step()
    assert first == second
    assert tree.begin() != tree.end()
    assert OrderedTree().begin() == OrderedTree().end()


def test_iterator_remembers_tree():
    tree = OrderedTree([1])
    assert tree.create_iterator().tree is tree


def test_insert_during_iteration_is_detected():
    tree = OrderedTree([1, 2, 3])
    iterator = tree.create_iterator()
    assert iterator.advance() == 1
    tree.insert(4)
    with pytest.raises(TreeModifiedError):
        iterator.advance()


def test_clear_during_iteration_is_detected():
    tree = OrderedTree([1, 2, 3])
    iterator = tree.create_iterator()
    tree.clear()
    with pytest.raises(TreeModifiedError):
        iterator.value


def test_end_sentinel_without_tree():
    iterator = InOrderIterator(None, None)
    assert not iterator.has_more()
    with pytest.raises(EmptyIteration):
        iterator.advance()


@given(st.lists(st.integers()))
def test_iteration_matches_sorted(xs):
    tree = OrderedTree(xs)
    assert drain(tree.create_iterator()) == sorted(xs)
