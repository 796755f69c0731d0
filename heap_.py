from array_ import Array
from utils import (AllocationError, HeapError, HeapKind, InvalidStateError,
                   StorageShrinkError, kind_to_label, ordering_for)

__all__ = [
    "AllocationError", "Heap", "HeapError", "HeapKind", "InvalidStateError",
    "StorageShrinkError", "delete_heap", "heap_extract", "heap_insert",
    "kind_to_label", "new_heap",
]


def left_child(i):
    return 2 * i + 1


def right_child(i):
    return 2 * i + 2


def parent(i):
    return (i - 1) // 2


class Heap:
    """Binary heap of integers stored as an implicit complete binary tree.

    For the element at index i the children sit at 2i+1 and 2i+2 and the
    parent at (i-1)//2. Every parent/child pair satisfies ``parent <= child``
    for a min heap and ``parent >= child`` for a max heap between calls.
    """

    def __init__(self, kind):
        if not isinstance(kind, HeapKind):
            raise InvalidStateError(f"Unknown heap type {kind!r}")
        self.kind = kind
        self.data = Array()
        self.initialized = True
        self._ordered = ordering_for(kind)

    def _check_initialized(self):
        if not self.initialized:
            raise InvalidStateError("Heap not initialized")

    def _property(self, parent_index, child_index):
        return self._ordered(self.data.get(parent_index), self.data.get(child_index))

    def insert(self, value):
        """Insert a value and maintain the heap property.

        The value is appended as the last leaf and bubbled up by successive
        swaps with its parent. Raises AllocationError if the storage cannot
        grow, in which case the heap is unchanged.
        """
        self._check_initialized()
        self.data.append(value)
        self._sift_up(self.data.length() - 1)

    def extract_top(self):
        """Remove and return the root, or None when the heap is empty.

        If the storage cannot be shrunk afterwards, StorageShrinkError is
        raised carrying the extracted value. The heap is still valid and
        already one element shorter at that point.
        """
        self._check_initialized()
        if self.data.length() == 0:
            return None

        top = self.data.get(0)
        last = self.data.pop()
        if self.data.length() > 0:
            # Replace the root with the last leaf and sink it
            self.data.set(0, last)
            self._sift_down(0)

        try:
            if self.data.length() == 0:
                self.data.delete_all()
            else:
                self.data.compact()
        except AllocationError as e:
            raise StorageShrinkError(top) from e
        return top

    def _sift_up(self, i):
        while i != 0 and not self._property(parent(i), i):
            self.data.swap(parent(i), i)
            i = parent(i)

    def _preferred_child(self, left, right):
        left_value = self.data.get(left)
        right_value = self.data.get(right)
        if self.kind is HeapKind.MIN:
            return left if left_value < right_value else right
        return left if left_value > right_value else right

    def _sift_down(self, i):
        size = self.data.length()
        while True:
            left = left_child(i)
            right = right_child(i)
            if left >= size:
                # no children
                break
            if right >= size:
                # a lone left child is always a leaf
                if not self._property(i, left):
                    self.data.swap(i, left)
                break
            child = self._preferred_child(left, right)
            if not self._property(i, child):
                self.data.swap(i, child)
            i = child

    def free(self):
        """Release the heap. It must have been drained first."""
        self._check_initialized()
        if self.data.length() != 0:
            raise InvalidStateError("Heap not empty")
        self.data.free()
        self.initialized = False

    def length(self):
        return self.data.length()

    def __len__(self):
        return self.data.length()

    def is_empty(self):
        return self.data.length() == 0

    def to_list(self):
        return self.data.to_list()


def new_heap(kind: HeapKind) -> Heap:
    return Heap(kind)


def delete_heap(heap: Heap) -> None:
    heap.free()


def heap_insert(heap: Heap, value: int) -> None:
    heap.insert(value)


def heap_extract(heap: Heap):
    return heap.extract_top()
