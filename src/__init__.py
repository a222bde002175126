from src.dary_heap import (
    ConfigurationError,
    DHeap,
    HeapError,
    InvalidIndexError,
    UnderflowError,
    heapsort,
    nsmallest,
)
