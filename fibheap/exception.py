"""
**********
Exceptions
**********

Base exceptions and errors for fibheap.
"""

__all__ = [
    "FibonacciHeapException",
    "FibonacciHeapError",
    "StaleHandleError",
    "KeyIncreaseError",
    "NodeNotFound",
]


class FibonacciHeapException(Exception):
    """Base class for exceptions in fibheap."""


class FibonacciHeapError(FibonacciHeapException):
    """Exception for a serious error in fibheap"""


class StaleHandleError(FibonacciHeapError, LookupError):
    """Raised when a handle refers to an element that is no longer in a heap.

    Elements leave a heap through `delete_min` or `delete`. Since this is
    also a `LookupError`, callers can treat it as a plain "not found".
    """


class KeyIncreaseError(FibonacciHeapError, ValueError):
    """Raised when `decrease_key` is given a key that is not strictly smaller
    than the current one. The heap is left unchanged.
    """


class NodeNotFound(FibonacciHeapException):
    """Exception raised if requested node is not present in the graph"""
