from album_core.algorithms.heap import MinHeap


def test_pop_min_returns_items_by_rank():
    heap = MinHeap()
    for item, rank in [("c", 3.0), ("a", 1.0), ("d", 4.0), ("b", 2.0)]:
        heap.push(item, rank)
    assert heap.size() == 4
    assert [heap.pop_min() for _ in range(4)] == ["a", "b", "c", "d"]
    assert len(heap) == 0


def test_pop_min_on_empty_heap_returns_none():
    heap = MinHeap()
    assert heap.pop_min() is None
    assert heap.pop_min_with_rank() is None


def test_same_item_can_be_pushed_with_different_ranks():
    heap = MinHeap()
    heap.push(7, 10.0)
    heap.push(7, 2.0)
    heap.push(3, 5.0)
    assert heap.pop_min_with_rank() == (7, 2.0)
    assert heap.pop_min_with_rank() == (3, 5.0)
    assert heap.pop_min_with_rank() == (7, 10.0)


def test_items_do_not_need_to_be_comparable():
    heap = MinHeap()
    first, second = object(), object()
    heap.push(first, 1.0)
    heap.push(second, 1.0)
    assert heap.pop_min() is first
    assert heap.pop_min() is second
