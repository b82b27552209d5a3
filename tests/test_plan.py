import unittest
from itertools import permutations

from stridesum import Axis, Fixed, plan, ShapeMismatchError, AxisMismatchError
from stridesum.plan import axis_strides
from utils import int_labels

class TestPlan(unittest.TestCase):

    def test_matrix_vector(self):
        p = plan([2, 3], [3], [2], [-1, -2], [-2], [-1])
        self.assertEqual(p.n_iter, 6)
        self.assertEqual(p.axes, (Axis(-1), Axis(-2)))
        self.assertEqual(p.iter_dims, (2, 3))
        self.assertEqual(p.strides_a, (0, 3, 1))
        self.assertEqual(p.strides_b, (0, 0, 1))
        self.assertEqual(p.strides_c, (0, 1, 0))
        self.assertEqual(str(p), "ab,b->a")

    def test_column_major(self):
        p = plan([2, 3], [3], [2], [-1, -2], [-2], [-1], order="F")
        self.assertEqual(p.strides_a, (0, 1, 2))
        self.assertEqual(p.strides_b, (0, 0, 1))
        self.assertEqual(p.strides_c, (0, 1, 0))
        self.assertRaises(ValueError, plan, [2], [2], [2], [-1], [-1], [-1], order="X")

    def test_axis_strides(self):
        self.assertEqual(axis_strides([2, 3, 4]), [12, 4, 1])
        self.assertEqual(axis_strides([2, 3, 4], "F"), [1, 2, 6])
        self.assertEqual(axis_strides([]), [])

    def test_outer_product(self):
        p = plan([2], [2], [2, 2], [-1], [-2], [-1, -2])
        self.assertEqual(p.n_iter, 4)
        self.assertEqual(p.strides_c, (0, 2, 1))

    def test_iteration_count(self):
        # the count only depends on the distinct axes, not on who introduces them
        shapes = {"A": ([2, 3], "ab"), "B": ([3, 4], "bc"), "C": ([2, 4], "ac")}
        for order in permutations("ABC"):
            (sa, la), (sb, lb), (sc, lc) = [shapes[name] for name in order]
            p = plan(sa, sb, sc, int_labels(la), int_labels(lb), int_labels(lc))
            self.assertEqual(p.n_iter, 24)
            self.assertEqual(sorted(p.iter_dims), [2, 3, 4])

    def test_sorted_by_size(self):
        p = plan([5, 2], [2], [5], [-1, -2], [-2], [-1])
        self.assertEqual(p.axes, (Axis(-2), Axis(-1)))
        self.assertEqual(p.iter_dims, (2, 5))
        self.assertEqual(p.strides_a, (0, 1, 2))

        # equal sizes keep the order of appearance
        p = plan([3, 3], [3], [3], [-2, -1], [-1], [-2])
        self.assertEqual(p.axes, (Axis(-2), Axis(-1)))

    def test_idempotence(self):
        args = ([4, 3, 3], [3, 2], [4, 2], [-1, -2, -3], [-3, -4], [-1, -4])
        self.assertEqual(plan(*args), plan(*args))

    def test_axis_mismatch(self):
        cases = [([2, 3], [4], [2], [-1, -2], [-2], [-1]),   # A vs B
                 ([2, 3], [3], [4], [-1, -2], [-2], [-1]),   # A vs C
                 ([2], [3], [4], [-1], [-2], [-2]),          # B vs C
                 ([3, 4], [], [], [-1, -1], [], [])]         # within A
        for case in cases:
            self.assertRaises(AxisMismatchError, plan, *case)

    def test_result_labels(self):
        self.assertRaises(AxisMismatchError, plan, [2], [], [2, 2, 2], [-1], [], [-1, -2, -3])
        # as many result labels as input labels is allowed
        p = plan([2], [3], [2, 3], [-1], [-2], [-1, -2])
        self.assertEqual(p.n_iter, 6)

    def test_shape_mismatch(self):
        self.assertRaises(ShapeMismatchError, plan, [2, 3], [3], [2], [-1], [-2], [-1])
        self.assertRaises(ShapeMismatchError, plan, [2], [3], [2], [-1], [-2, -3], [-1])
        self.assertRaises(ShapeMismatchError, plan, [2], [3], [2, 1], [-1], [-2], [-1])
        self.assertRaises(ShapeMismatchError, plan, [-2], [3], [2], [-1], [-2], [-1])
        self.assertRaises(ShapeMismatchError, plan, [2.0], [3], [2], [-1], [-2], [-1])
        self.assertRaises(ShapeMismatchError, plan, [2], [3], [2], [-1], [0.5], [-1])

    def test_fixed_index(self):
        p = plan([2, 3], [3], [], [1, -1], [-1], [])
        self.assertEqual(p.strides_a, (3, 1))
        self.assertEqual(p.strides_b, (0, 1))
        self.assertEqual(p.strides_c, (0, 0))
        self.assertEqual(p.n_iter, 3)
        self.assertEqual(str(p), "[1]a,a->")

        p = plan([2, 3], [3], [], [Fixed(1), Axis("j")], [Axis("j")], [], order="F")
        self.assertEqual(p.strides_a, (1, 2))

        self.assertRaises(ShapeMismatchError, plan, [2, 3], [3], [], [2, -1], [-1], [])

    def test_trace(self):
        p = plan([3, 3], [], [], [-1, -1], [], [])
        self.assertEqual(p.n_iter, 3)
        self.assertEqual(p.iter_dims, (3,))
        self.assertEqual(p.strides_a, (0, 4))

    def test_zero_size(self):
        p = plan([0], [0], [], [-1], [-1], [])
        self.assertEqual(p.n_iter, 0)

        p = plan([], [], [], [], [], [])
        self.assertEqual(p.n_iter, 1)
        self.assertEqual(p.iter_dims, ())
        self.assertEqual(p.strides_a, (0,))

if __name__ == '__main__':
    unittest.main()
