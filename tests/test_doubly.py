from hypothesis import given
from hypothesis import strategies as st

from linearkit.doubly import DoublyLinkedList, DoublyNode


def test_sample_traversals():
    items = DoublyLinkedList([1, 2, 3])
    assert items.forward() == [1, 2, 3]
    assert items.backward() == [3, 2, 1]


def test_empty_list():
    items = DoublyLinkedList()
    assert len(items) == 0
    assert items.forward() == []
    assert items.backward() == []
    assert items.head is None and items.tail is None


@given(st.lists(st.integers(), max_size=40))
def test_round_trip(values):
    items = DoublyLinkedList(values)
    assert len(items) == len(values)
    assert list(items) == values
    assert list(reversed(items)) == values[::-1]
    assert items.backward() == items.forward()[::-1]


@given(st.lists(st.integers(), min_size=1, max_size=40))
def test_links_are_consistent(values):
    items = DoublyLinkedList(values)
    assert items.head.prev is None
    assert items.tail.next is None
    node = items.head
    while node.next is not None:
        assert node.next.prev is node
        node = node.next
    assert node is items.tail


def test_append_returns_node_and_updates_tail():
    items = DoublyLinkedList([4])
    node = items.append(5)
    assert isinstance(node, DoublyNode)
    assert items.tail is node
    assert node.value == 5
    assert node.prev is items.head
    assert items.forward() == [4, 5]
    assert len(items) == 2