from src.dary_heap.dary_heap import DHeap
from src.dary_heap.topk import nsmallest


class TestNSmallest:
    def test_nsmallest_with_negative_k(self):
        heap = DHeap([10, 5, 3])
        assert nsmallest(heap, -1) == []
        assert nsmallest(heap, 0) == []

    def test_nsmallest_with_empty_heap(self):
        heap = DHeap()
        assert nsmallest(heap, 5) == []

    def test_nsmallest_binary_heap(self):
        heap = DHeap([10, 5, 15, 1, 20])
        assert nsmallest(heap, 3) == [1, 5, 10]

    def test_nsmallest_does_not_mutate(self):
        heap = DHeap([10, 5, 15, 1, 20], branching_factor=3)
        before = [heap.get(i) for i in range(1, len(heap) + 1)]

        nsmallest(heap, 4)

        assert len(heap) == 5
        assert [heap.get(i) for i in range(1, len(heap) + 1)] == before
        assert heap.find_min() == 1

    def test_nsmallest_k_larger_than_heap(self):
        heap = DHeap([3, 1, 2], branching_factor=4)
        assert nsmallest(heap, 10) == [1, 2, 3]

    def test_nsmallest_with_duplicates(self):
        heap = DHeap([10, 10, 5, 15])
        result = nsmallest(heap, 3)
        assert result == [5, 10, 10]

    def test_nsmallest_with_negative_values(self):
        heap = DHeap([-10, 0, 5, -5], branching_factor=3)
        assert nsmallest(heap, 2) == [-10, -5]

    def test_nsmallest_with_tuples(self):
        heap = DHeap([(2, "b"), (1, "a"), (3, "c")])
        assert nsmallest(heap, 2) == [(1, "a"), (2, "b")]

    def test_nsmallest_after_inserts_and_deletes(self):
        heap = DHeap(branching_factor=5)
        for value in [9, 4, 7, 1, 8, 2, 6, 3, 5]:
            heap.insert(value)
        heap.delete_min()
        assert nsmallest(heap, 4) == [2, 3, 4, 5]

    def test_nsmallest_large_heap(self):
        values = [(i * 7919) % 1000 for i in range(1000)]
        heap = DHeap(values, branching_factor=4)
        assert nsmallest(heap, 25) == sorted(values)[:25]
