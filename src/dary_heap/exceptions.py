class HeapError(Exception):
    """Base class for all errors raised by the heap."""


class ConfigurationError(HeapError, ValueError):
    """Raised when a heap is constructed with an invalid branching factor."""


class UnderflowError(HeapError, RuntimeError):
    """Raised when reading or removing the minimum of an empty heap."""


class InvalidIndexError(HeapError, ValueError, IndexError):
    """Raised when an index lies outside the domain of an index formula."""
