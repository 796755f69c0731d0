import numpy as np

from utils import AllocationError

INT64 = np.iinfo(np.int64)


class Array:
    """Contiguous int64 storage with a logical length and a spare capacity.

    Capacity doubles when an append finds the buffer full and halves on
    compact() once three quarters of it are unused.
    """

    def __init__(self, size=0):
        if size < 0:
            raise ValueError("size must not be negative")
        self.elements = self._allocate(size)
        self.size = size
        self.index = 0

    @staticmethod
    def _allocate(size):
        try:
            return np.empty(size, dtype=np.int64)
        except MemoryError as e:
            raise AllocationError(f"Could not allocate {size} elements") from e

    @staticmethod
    def _check_value(value):
        if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, np.integer)):
            raise TypeError(f"expected an integer, got {type(value).__name__}")
        value = int(value)
        if not INT64.min <= value <= INT64.max:
            raise OverflowError(f"{value} does not fit in a signed 64-bit integer")
        return value

    def _check_index(self, i):
        if not 0 <= i < self.index:
            raise IndexError(f"index {i} out of range for length {self.index}")

    def _reallocate(self, size):
        # Copy into a fresh buffer first so a failed allocation leaves
        # the current contents untouched.
        elements = self._allocate(size)
        elements[:self.index] = self.elements[:self.index]
        self.elements = elements
        self.size = size

    def _resize(self):
        self._reallocate(max(self.size * 2, 1))

    def append(self, value):
        value = self._check_value(value)
        if self.index >= self.size:
            self._resize()
        self.elements[self.index] = value
        self.index += 1

    def pop(self):
        if self.index == 0:
            raise IndexError("pop from empty array")
        self.index -= 1
        return int(self.elements[self.index])

    def get(self, i):
        self._check_index(i)
        return int(self.elements[i])

    def set(self, i, value):
        self._check_index(i)
        self.elements[i] = self._check_value(value)

    def swap(self, i, j):
        self._check_index(i)
        self._check_index(j)
        self.elements[i], self.elements[j] = self.elements[j], self.elements[i]

    def compact(self):
        """Halve the capacity when at most a quarter of it is in use.

        Returns True if the buffer was reallocated.
        """
        if self.size > 1 and self.index <= self.size // 4:
            self._reallocate(max(self.size // 2, 1))
            return True
        return False

    def length(self):
        return self.index

    def __len__(self):
        return self.index

    def to_list(self):
        return self.elements[:self.index].tolist()

    def delete_all(self):
        self.index = 0

    def free(self):
        """Frees the array resources. The array must not be used afterwards."""
        del self.elements
        self.size = 0
        self.index = 0
