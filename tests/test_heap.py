import pytest

from bintrees_kit.heap import MaxHeap, is_heap
from bintrees_kit.tree import Node

VALUES = [79, 47, 68, 87, 84, 91, 21, 32, 34, 2, 20, 22, 98, 1, 62, 95]


def test_is_heap_none_is_false():
    assert is_heap(None) is False


def test_is_heap_single_node():
    assert is_heap(Node(5)) is True


def test_is_heap_rejects_child_larger_than_parent():
    root = Node(10)
    root.left = Node(20, root)
    assert is_heap(root) is False


def test_is_heap_rejects_incomplete_shape():
    root = Node(10)
    root.right = Node(5, root)
    assert is_heap(root) is False


def test_is_heap_accepts_equal_children():
    root = Node(7)
    root.left = Node(7, root)
    root.right = Node(7, root)
    assert is_heap(root) is True


def test_from_iterable_builds_valid_heap():
    heap = MaxHeap.from_iterable(VALUES)
    assert is_heap(heap.root)
    assert len(heap) == len(VALUES)
    assert heap.root.value == max(VALUES)


def test_insert_first_value_becomes_root():
    heap = MaxHeap()
    node = heap.insert(42)
    assert node is heap.root
    assert node.value == 42


def test_insert_returns_node_holding_value_after_sift():
    heap = MaxHeap.from_iterable([10, 5])
    node = heap.insert(20)
    assert node is heap.root
    assert node.value == 20
    assert sorted(heap.root.preorder()) == [5, 10, 20]


def test_insert_keeps_duplicates():
    heap = MaxHeap.from_iterable([5, 5, 5])
    assert len(heap) == 3
    assert is_heap(heap.root)


def test_extract_returns_values_in_descending_order():
    heap = MaxHeap.from_iterable(VALUES)
    extracted = []
    while len(heap):
        extracted.append(heap.extract())
        if heap.root is not None:
            assert is_heap(heap.root)
    assert extracted == sorted(VALUES, reverse=True)


def test_extract_last_value_empties_heap():
    heap = MaxHeap.from_iterable([3])
    assert heap.extract() == 3
    assert heap.root is None
    assert len(heap) == 0


def test_extract_from_empty_heap_raises():
    with pytest.raises(IndexError):
        MaxHeap().extract()


def test_to_sorted_list_consumes_heap():
    heap = MaxHeap.from_iterable(VALUES)
    assert heap.to_sorted_list() == sorted(VALUES, reverse=True)
    assert heap.root is None


def test_to_sorted_list_of_empty_heap():
    assert MaxHeap().to_sorted_list() == []


@pytest.mark.parametrize("count", range(1, 20))
def test_shape_stays_complete(count):
    heap = MaxHeap.from_iterable(range(count))
    assert is_heap(heap.root)
    assert len(heap) == count