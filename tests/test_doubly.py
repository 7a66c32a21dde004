import pytest

from dsakit.doubly import DoublyLinkedList


def test_insert_back_order():
    lst = DoublyLinkedList()
    for value in (1, 2, 3, 4, 5):
        lst.insert_back(value)
    assert list(lst) == [1, 2, 3, 4, 5]
    assert list(reversed(lst)) == [5, 4, 3, 2, 1]


def test_demo_deletions_empty_the_list():
    lst = DoublyLinkedList([1, 2, 3, 4, 5])
    for pos in (5, 4, 3, 2):
        lst.delete_at(pos)
    assert list(lst) == [1]
    assert lst.delete_front() == 1
    assert list(lst) == []
    assert len(lst) == 0


def test_insert_front():
    lst = DoublyLinkedList()
    lst.insert_front(2)
    lst.insert_front(1)
    lst.insert_back(3)
    assert list(lst) == [1, 2, 3]
    assert list(reversed(lst)) == [3, 2, 1]


def test_delete_front_empty_raises():
    with pytest.raises(IndexError):
        DoublyLinkedList().delete_front()


def test_delete_at_middle_keeps_both_directions():
    lst = DoublyLinkedList([1, 2, 3, 4])
    assert lst.delete_at(2) == 2
    assert list(lst) == [1, 3, 4]
    assert list(reversed(lst)) == [4, 3, 1]


def test_delete_at_last_updates_tail():
    lst = DoublyLinkedList([1, 2, 3])
    assert lst.delete_at(3) == 3
    lst.insert_back(9)
    assert list(reversed(lst)) == [9, 2, 1]


@pytest.mark.parametrize("pos", [0, 4, -2])
def test_delete_at_out_of_range(pos):
    with pytest.raises(IndexError):
        DoublyLinkedList([1, 2, 3]).delete_at(pos)


def test_reversed_is_mirror_of_forward():
    lst = DoublyLinkedList([8, 6, 7, 5, 3])
    lst.insert_front(0)
    lst.delete_at(4)
    assert list(reversed(lst)) == list(lst)[::-1]
    assert len(lst) == len(list(lst))