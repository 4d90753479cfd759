import pytest

from segdeque.linked_list import LinkedList


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert list(lst) == []
    with pytest.raises(IndexError):
        lst.get_first()
    with pytest.raises(IndexError):
        lst.get_last()


def test_construct_from_items():
    lst = LinkedList([1, 2, 3])
    assert list(lst) == [1, 2, 3]
    assert len(lst) == 3
    assert lst.get_first() == 1
    assert lst.get_last() == 3


def test_copy_is_independent():
    original = LinkedList(["a", "b"])
    duplicate = original.copy()
    duplicate.append("c")
    duplicate[0] = "z"
    assert list(original) == ["a", "b"]
    assert list(duplicate) == ["z", "b", "c"]


def test_get_and_bounds():
    lst = LinkedList([10, 20, 30])
    assert lst.get(1) == 20
    assert lst[2] == 30
    with pytest.raises(IndexError):
        lst.get(3)
    with pytest.raises(IndexError):
        lst.get(-1)
    with pytest.raises(IndexError):
        lst[3]


def test_append_and_prepend():
    lst = LinkedList()
    lst.append(2)
    lst.prepend(1)
    lst.append(3)
    assert list(lst) == [1, 2, 3]
    assert lst.get_last() == 3


def test_prepend_on_empty_sets_tail():
    lst = LinkedList()
    lst.prepend("x")
    assert lst.get_first() == "x"
    assert lst.get_last() == "x"


def test_insert_at_positions():
    lst = LinkedList([1, 3])
    lst.insert_at(2, 1)
    lst.insert_at(0, 0)
    lst.insert_at(4, 4)
    assert list(lst) == [0, 1, 2, 3, 4]
    assert lst.get_last() == 4


def test_insert_at_out_of_range():
    lst = LinkedList([1])
    with pytest.raises(IndexError):
        lst.insert_at(9, 2)
    with pytest.raises(IndexError):
        lst.insert_at(9, -1)
    assert list(lst) == [1]


def test_remove_at_head_middle_tail():
    lst = LinkedList([1, 2, 3, 4])
    lst.remove_at(0)
    assert list(lst) == [2, 3, 4]
    lst.remove_at(1)
    assert list(lst) == [2, 4]
    lst.remove_at(1)
    assert list(lst) == [2]
    assert lst.get_last() == 2


def test_remove_last_element_empties_list():
    lst = LinkedList(["only"])
    lst.remove_at(0)
    assert len(lst) == 0
    with pytest.raises(IndexError):
        lst.get_last()
    lst.append("again")
    assert lst.get_first() == "again"
    assert lst.get_last() == "again"


def test_remove_at_out_of_range():
    lst = LinkedList([1, 2])
    with pytest.raises(IndexError):
        lst.remove_at(2)


def test_get_sublist():
    lst = LinkedList([0, 1, 2, 3, 4])
    assert list(lst.get_sublist(1, 3)) == [1, 2, 3]
    assert list(lst.get_sublist(4, 4)) == [4]


@pytest.mark.parametrize("start,end", [(-1, 2), (0, 5), (3, 2)])
def test_get_sublist_invalid(start, end):
    lst = LinkedList([0, 1, 2, 3, 4])
    with pytest.raises(IndexError):
        lst.get_sublist(start, end)


def test_concat_returns_new_list():
    first = LinkedList([1, 2])
    second = LinkedList([3, 4])
    joined = first.concat(second)
    assert list(joined) == [1, 2, 3, 4]
    assert list(first) == [1, 2]
    assert list(second) == [3, 4]
    assert len(joined) == len(first) + len(second)


def test_setitem():
    lst = LinkedList([1, 2, 3])
    lst[1] = "two"
    assert list(lst) == [1, "two", 3]
    with pytest.raises(IndexError):
        lst[3] = 4