from enum import Enum
from typing import Callable, Sequence


class HeapKind(Enum):
    MIN = "min_heap"
    MAX = "max_heap"


class HeapError(Exception):
    """Base class for every failure reported by a heap or its storage."""


class AllocationError(HeapError):
    """Storage could not be grown or shrunk."""


class InvalidStateError(HeapError):
    """An operation was called on a heap in a state that forbids it."""


class StorageShrinkError(InvalidStateError):
    """The top was extracted but releasing the spare storage failed.

    The extracted value travels with the error in ``value`` since the
    element is already gone from the heap.
    """

    def __init__(self, value, message="Could not shrink heap by 1"):
        super().__init__(message)
        self.value = value


def kind_to_label(kind: HeapKind) -> str:
    """Return "min_heap" or "max_heap" for a heap kind."""
    return kind.value


def is_min_ordered(parent: int, child: int) -> bool:
    """Check if a parent/child pair satisfies the min heap property."""
    return parent <= child


def is_max_ordered(parent: int, child: int) -> bool:
    """Check if a parent/child pair satisfies the max heap property."""
    return parent >= child


def ordering_for(kind: HeapKind) -> Callable[[int, int], bool]:
    if kind is HeapKind.MIN:
        return is_min_ordered
    if kind is HeapKind.MAX:
        return is_max_ordered
    raise InvalidStateError(f"Unknown heap type {kind!r}")


def is_heap(values: Sequence[int], kind: HeapKind) -> bool:
    """Check the heap property over values laid out in array order."""
    ordered = ordering_for(kind)
    for i in range(1, len(values)):
        if not ordered(values[(i - 1) // 2], values[i]):
            return False
    return True
