import logging

from src import DHeap, heapsort, nsmallest

logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

priorities = [10.5, 3.2, 15.0, 7.8, 20.1, 1.5]

# Create a ternary heap (branching_factor=3)
print("Creating ternary heap...")
heap = DHeap(priorities, branching_factor=3)

# Test basic properties
print(f"Heap size: {len(heap)}")
print(f"Is empty: {heap.is_empty()}")
print(f"First leaf index: {heap.first_leaf_index()}")
print(f"Minimum: {heap.find_min()}")
print(f"Three smallest: {nsmallest(heap, 3)}")

for priority in [0.5, 30.0, 2.2, 9.9]:
    heap.insert(priority)
print(f"Heap after inserts: {heap!r}")

print("Draining heap:", [heap.delete_min() for _ in range(len(heap))])
print("Heapsort with d=4:", heapsort(priorities, branching_factor=4))
