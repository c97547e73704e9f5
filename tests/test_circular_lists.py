import pytest

from algokit.circular_lists import CircularDoublyList, CircularList


def test_construct_and_iterate():
    values = [5, 3, 8, 1]
    for lst in (CircularList(values), CircularDoublyList(values)):
        assert list(lst) == values
        assert len(lst) == len(values)


def test_empty_list():
    for lst in (CircularList(), CircularDoublyList()):
        assert list(lst) == []
        assert len(lst) == 0
        assert lst.has_loop() is False


def test_has_loop_when_filled():
    assert CircularList([1, 2, 3]).has_loop() is True
    assert CircularList([7]).has_loop() is True
    assert CircularDoublyList([1, 2, 3]).has_loop() is True
    assert CircularDoublyList([7]).has_loop() is True


def test_append():
    for lst in (CircularList([1, 2]), CircularDoublyList([1, 2])):
        lst.append(3)
        assert list(lst) == [1, 2, 3]


def test_insert_at_front_and_back():
    values = [10, 20, 30]
    for lst in (CircularList(values), CircularDoublyList(values)):
        lst.insert_at(1, 5)
        lst.insert_at(0, 40)
        assert list(lst) == [5] + values + [40]


@pytest.mark.parametrize("position", [2, 3, 4])
def test_insert_at_middle_and_one_past_end(position):
    values = [10, 20, 30]
    expected = list(values)
    expected.insert(position - 1, 99)
    for lst in (CircularList(values), CircularDoublyList(values)):
        lst.insert_at(position, 99)
        assert list(lst) == expected
        assert lst.positions(99) == [position]


def test_insert_at_out_of_bounds():
    for lst in (CircularList([1, 2, 3]), CircularDoublyList([1, 2, 3])):
        with pytest.raises(IndexError):
            lst.insert_at(5, 9)
        with pytest.raises(IndexError):
            lst.insert_at(-1, 9)
        assert list(lst) == [1, 2, 3]


def test_insert_at_into_empty():
    for lst in (CircularList(), CircularDoublyList()):
        lst.insert_at(1, 4)
        lst.insert_at(0, 6)
        assert list(lst) == [4, 6]


def test_insert_after_every_match():
    for lst in (CircularList([1, 2, 1, 3]), CircularDoublyList([1, 2, 1, 3])):
        lst.insert_after(1, 9)
        assert list(lst) == [1, 9, 2, 1, 9, 3]


def test_insert_after_last_node_goes_to_back():
    for lst in (CircularList([1, 2, 3]), CircularDoublyList([1, 2, 3])):
        lst.insert_after(3, 4)
        assert list(lst) == [1, 2, 3, 4]
        assert len(lst) == 4


def test_insert_after_missing():
    for lst in (CircularList([1, 2]), CircularDoublyList([1, 2])):
        with pytest.raises(ValueError):
            lst.insert_after(7, 9)


def test_insert_before_head_becomes_front():
    for lst in (CircularList([1, 2, 3]), CircularDoublyList([1, 2, 3])):
        lst.insert_before(1, 0)
        assert list(lst) == [0, 1, 2, 3]


def test_insert_before_middle():
    for lst in (CircularList([1, 2, 3]), CircularDoublyList([1, 2, 3])):
        lst.insert_before(3, 9)
        assert list(lst) == [1, 2, 9, 3]


def test_singly_insert_before_first_match_only():
    lst = CircularList([4, 2, 4])
    lst.insert_before(4, 9)
    assert list(lst) == [9, 4, 2, 4]


def test_doubly_insert_before_every_match():
    lst = CircularDoublyList([4, 2, 4])
    lst.insert_before(4, 9)
    assert list(lst) == [9, 4, 2, 9, 4]


def test_insert_before_missing():
    for lst in (
        CircularList([1, 2]),
        CircularDoublyList([1, 2]),
        CircularList(),
        CircularDoublyList(),
    ):
        with pytest.raises(ValueError):
            lst.insert_before(5, 0)


def test_remove_every_match():
    values = [2, 1, 2, 2, 3, 2]
    for lst in (CircularList(values), CircularDoublyList(values)):
        lst.remove(2)
        assert list(lst) == [1, 3]
        assert len(lst) == 2


def test_remove_until_empty():
    for lst in (CircularList([5, 5]), CircularDoublyList([5, 5])):
        lst.remove(5)
        assert list(lst) == []
        assert lst.has_loop() is False


def test_remove_missing():
    for lst in (CircularList([1]), CircularDoublyList([1])):
        with pytest.raises(ValueError):
            lst.remove(2)


def test_delete_first_and_last():
    for lst in (CircularList([1, 2, 3, 4]), CircularDoublyList([1, 2, 3, 4])):
        assert lst.delete_at(1) == 1
        assert lst.delete_at(0) == 4
        assert list(lst) == [2, 3]


@pytest.mark.parametrize("position", [1, 2, 3, 4])
def test_delete_at_position(position):
    values = [10, 20, 30, 40]
    for lst in (CircularList(values), CircularDoublyList(values)):
        assert lst.delete_at(position) == values[position - 1]
        assert list(lst) == values[: position - 1] + values[position:]


def test_delete_out_of_bounds():
    for lst in (CircularList([1, 2]), CircularDoublyList([1, 2])):
        with pytest.raises(IndexError):
            lst.delete_at(3)
    for lst in (CircularList(), CircularDoublyList()):
        with pytest.raises(IndexError):
            lst.delete_at(1)


def test_positions():
    for lst in (CircularList([7, 3, 7, 1]), CircularDoublyList([7, 3, 7, 1])):
        assert lst.positions(7) == [1, 3]
        assert lst.positions(5) == []


def test_sort():
    values = [5, -1, 3, 3, 0, 9]
    for lst in (CircularList(values), CircularDoublyList(values)):
        lst.sort()
        assert list(lst) == sorted(values)
        assert len(lst) == len(values)


def test_doubly_reverse():
    values = [1, 2, 3, 4, 5]
    lst = CircularDoublyList(values)
    lst.reverse()
    assert list(lst) == values[::-1]
    assert list(reversed(lst)) == values


def test_doubly_reverse_keeps_links_working():
    lst = CircularDoublyList([1, 2, 3])
    lst.reverse()
    lst.append(0)
    lst.insert_at(1, 4)
    assert list(lst) == [4, 3, 2, 1, 0]
    assert list(reversed(lst)) == [0, 1, 2, 3, 4]


def test_doubly_reversed_iteration():
    values = [3, 1, 4, 1, 5]
    lst = CircularDoublyList(values)
    assert list(reversed(lst)) == values[::-1]
    assert list(reversed(CircularDoublyList())) == []


def test_doubly_backward_matches_forward_after_edits():
    lst = CircularDoublyList([1, 2, 3, 4])
    lst.insert_after(2, 9)
    lst.remove(3)
    lst.delete_at(0)
    assert list(lst) == [1, 2, 9]
    assert list(reversed(lst)) == [9, 2, 1]