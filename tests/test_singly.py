import pytest
from hypothesis import given
from hypothesis import strategies as st

from linearkit.singly import SinglyLinkedList, SinglyNode


def test_two_node_list():
    chain = SinglyLinkedList([2, 5])
    assert list(chain) == [2, 5]
    assert chain.head is not None
    assert chain.head.next is not None
    assert chain.head.next.next is None


def test_push_front_reverses_order():
    chain = SinglyLinkedList()
    for value in (1, 3, 5):
        chain.push_front(value)
    assert list(chain) == [5, 3, 1]


def test_append_keeps_order():
    chain = SinglyLinkedList()
    for value in (1, 5, 4):
        chain.append(value)
    assert list(chain) == [1, 5, 4]
    assert len(chain) == 3


def test_delete_fourth_of_seven():
    chain = SinglyLinkedList([1, 5, 4, 8, 9, 7, 2])
    assert chain.delete_at(4) == 8
    assert list(chain) == [1, 5, 4, 9, 7, 2]
    assert len(chain) == 6


def test_delete_head_and_tail():
    chain = SinglyLinkedList([1, 5, 4])
    assert chain.delete_at(1) == 1
    assert chain.delete_at(2) == 4
    assert list(chain) == [5]


def test_delete_last_leaves_empty():
    chain = SinglyLinkedList([7])
    assert chain.delete_at(1) == 7
    assert chain.head is None
    assert list(chain) == []


@pytest.mark.parametrize("position", [0, -1, 4])
def test_delete_out_of_range(position):
    chain = SinglyLinkedList([1, 2, 3])
    with pytest.raises(IndexError):
        chain.delete_at(position)
    assert list(chain) == [1, 2, 3]


def test_delete_from_empty():
    with pytest.raises(IndexError):
        SinglyLinkedList().delete_at(1)


def test_insert_at_front_and_end():
    chain = SinglyLinkedList()
    chain.insert_at(2, 1)
    chain.insert_at(1, 1)
    chain.insert_at(3, 3)
    assert list(chain) == [1, 2, 3]


@pytest.mark.parametrize("position", [0, 3, -2])
def test_insert_out_of_bounds(position):
    chain = SinglyLinkedList([1])
    with pytest.raises(IndexError):
        chain.insert_at(9, position)
    assert list(chain) == [1]


def test_insert_returns_node():
    chain = SinglyLinkedList([1, 3])
    node = chain.insert_at(2, 2)
    assert isinstance(node, SinglyNode)
    assert node.value == 2
    assert node.next is not None and node.next.value == 3


@given(st.lists(st.integers()), st.integers(), st.data())
def test_insert_matches_list(values, value, data):
    position = data.draw(st.integers(min_value=1, max_value=len(values) + 1))
    chain = SinglyLinkedList(values)
    chain.insert_at(value, position)
    expected = list(values)
    expected.insert(position - 1, value)
    assert list(chain) == expected
    assert len(chain) == len(expected)


@given(st.lists(st.integers(), min_size=1), st.data())
def test_delete_matches_list(values, data):
    position = data.draw(st.integers(min_value=1, max_value=len(values)))
    chain = SinglyLinkedList(values)
    removed = chain.delete_at(position)
    expected = list(values)
    assert removed == expected.pop(position - 1)
    assert list(chain) == expected
    assert len(chain) == len(expected)


@given(st.lists(st.integers()))
def test_push_front_equals_reversed(values):
    chain = SinglyLinkedList()
    for value in values:
        chain.push_front(value)
    assert list(chain) == values[::-1]


@given(st.lists(st.integers()))
def test_append_round_trip(values):
    chain = SinglyLinkedList(values)
    assert list(chain) == values
    assert len(chain) == len(values)