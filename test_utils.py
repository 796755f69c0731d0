import unittest

from utils import (HeapKind, InvalidStateError, is_heap, is_max_ordered,
                   is_min_ordered, kind_to_label, ordering_for)


class TestUtils(unittest.TestCase):

    def test_predicates(self):
        self.assertTrue(is_min_ordered(1, 2))
        self.assertTrue(is_min_ordered(2, 2))
        self.assertFalse(is_min_ordered(3, 2))

        self.assertTrue(is_max_ordered(3, 2))
        self.assertTrue(is_max_ordered(2, 2))
        self.assertFalse(is_max_ordered(1, 2))

    def test_ordering_for(self):
        self.assertIs(is_min_ordered, ordering_for(HeapKind.MIN))
        self.assertIs(is_max_ordered, ordering_for(HeapKind.MAX))
        with self.assertRaises(InvalidStateError):
            ordering_for("max_heap")

    def test_is_heap(self):
        self.assertTrue(is_heap([], HeapKind.MIN))
        self.assertTrue(is_heap([4], HeapKind.MAX))
        self.assertTrue(is_heap([1, 2, 4, 5, 3], HeapKind.MIN))
        self.assertFalse(is_heap([1, 2, 4, 0], HeapKind.MIN))
        self.assertTrue(is_heap([9, 5, 8, 1, 2], HeapKind.MAX))
        self.assertFalse(is_heap([9, 5, 8, 1, 6], HeapKind.MAX))

    def test_labels(self):
        self.assertEqual("min_heap", kind_to_label(HeapKind.MIN))
        self.assertEqual("max_heap", kind_to_label(HeapKind.MAX))


if __name__ == '__main__':
    unittest.main()
