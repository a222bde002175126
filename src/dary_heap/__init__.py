from src.dary_heap.dary_heap import DHeap
from src.dary_heap.exceptions import (
    ConfigurationError,
    HeapError,
    InvalidIndexError,
    UnderflowError,
)
from src.dary_heap.heapsort import heapsort
from src.dary_heap.topk import nsmallest
