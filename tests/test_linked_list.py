import pytest

from algopractice.linked_list import LinkedList


def test_new_list_is_empty():
    items = LinkedList()
    assert items.is_empty()
    assert len(items) == 0
    assert items.first() is items.last()


def test_insert_at_first_and_get():
    items = LinkedList()
    items.insert(items.first(), 9)
    assert items.get(items.first()) == 9
    assert not items.is_empty()
    assert len(items) == 1


def test_insert_at_first_prepends():
    items = LinkedList()
    for value in [1, 2, 3]:
        items.insert(items.first(), value)
    assert list(items) == [3, 2, 1]


def test_insert_at_last_appends():
    items = LinkedList()
    for value in [1, 2, 3]:
        items.insert(items.last(), value)
    assert list(items) == [1, 2, 3]
    assert len(items) == 3


def test_constructor_from_iterable():
    assert list(LinkedList("abc")) == ["a", "b", "c"]


def test_walk_positions_with_next():
    items = LinkedList([10, 20, 30])
    seen = []
    position = items.first()
    while position is not items.last():
        seen.append(items.get(position))
        position = items.next(position)
    assert seen == [10, 20, 30]


def test_delete_middle():
    items = LinkedList([1, 2, 3])
    items.delete(items.next(items.first()))
    assert list(items) == [1, 3]
    assert len(items) == 2


def test_delete_final_element_moves_last():
    items = LinkedList([1, 2, 3])
    before_last = items.next(items.next(items.first()))
    items.delete(before_last)
    assert items.last() is before_last
    items.insert(items.last(), 4)
    assert list(items) == [1, 2, 4]


def test_delete_until_empty():
    items = LinkedList([1, 2])
    items.delete(items.first())
    items.delete(items.first())
    assert items.is_empty()
    assert items.first() is items.last()
    assert list(items) == []


def test_get_at_end_raises():
    items = LinkedList([1])
    with pytest.raises(IndexError):
        items.get(items.last())


def test_delete_at_end_raises():
    items = LinkedList()
    with pytest.raises(IndexError):
        items.delete(items.last())


def test_next_past_end_raises():
    items = LinkedList([1])
    with pytest.raises(IndexError):
        items.next(items.last())