import unittest
import numpy as np

from stridesum import Axis, Fixed, as_label, as_labels, ShapeMismatchError

class TestLabel(unittest.TestCase):

    def test_construction(self):
        self.assertRaises(ShapeMismatchError, Fixed, -1)
        self.assertRaises(ShapeMismatchError, Fixed, 1.0)
        self.assertRaises(ValueError, Fixed, True)
        self.assertEqual(Fixed(np.int64(2)).index, 2)

    def test_as_label(self):
        self.assertEqual(as_label(-1), Axis(-1))
        self.assertEqual(as_label(0), Fixed(0))
        self.assertEqual(as_label(3), Fixed(3))
        self.assertEqual(as_label(np.int32(-4)), Axis(-4))
        self.assertEqual(as_label(Axis("i")), Axis("i"))
        self.assertEqual(as_label(Fixed(1)), Fixed(1))
        self.assertRaises(ShapeMismatchError, as_label, "i")
        self.assertRaises(ShapeMismatchError, as_label, 1.5)
        self.assertRaises(ShapeMismatchError, as_label, False)

    def test_as_labels(self):
        self.assertEqual(as_labels([1, -1, -2]), (Fixed(1), Axis(-1), Axis(-2)))
        self.assertEqual(as_labels([]), ())

    def test_eq_hash(self):
        labels = [Axis(-1), Axis(-2), Axis("i"), Fixed(0), Fixed(1)]
        for i in range(len(labels)):
            self.assertEqual(labels[i], labels[i])
            for j in range(i + 1, len(labels)):
                self.assertNotEqual(labels[i], labels[j])
        self.assertEqual(len(labels), len(set(labels + labels)))

if __name__ == '__main__':
    unittest.main()
