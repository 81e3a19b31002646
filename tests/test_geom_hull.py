import unittest

import numpy as np
from scipy.spatial import ConvexHull

from charade.geom.core import Point, as_points
from charade.geom.hull import convex_hull, turn
from charade.geom.polygon import polygon_area


def inside_or_on(hull, p, tol=1e-9):
    n = len(hull)
    return all(turn(hull[i], hull[(i + 1) % n], p) >= -tol for i in range(n))


class TurnTests(unittest.TestCase):
    def test_turn_sign(self):
        a, b = Point(0.0, 0.0), Point(1.0, 0.0)
        self.assertGreater(turn(a, b, Point(0.5, 1.0)), 0.0)
        self.assertLess(turn(a, b, Point(0.5, -1.0)), 0.0)
        self.assertEqual(turn(a, b, Point(2.0, 0.0)), 0.0)


class ConvexHullTests(unittest.TestCase):
    def test_degenerate_sizes(self):
        self.assertEqual(convex_hull([]), ())
        self.assertEqual(convex_hull([(1, 2)]), (Point(1.0, 2.0),))

    def test_duplicates_collapse(self):
        self.assertEqual(convex_hull([(1, 2)] * 4), (Point(1.0, 2.0),))
        self.assertEqual(convex_hull([(0, 0), (1, 1), (0, 0), (1, 1)]), (Point(0.0, 0.0), Point(1.0, 1.0)))

    def test_collinear_points_reduce_to_endpoints(self):
        hull = convex_hull([(2, 2), (0, 0), (3, 3), (1, 1)])
        self.assertEqual(hull, (Point(0.0, 0.0), Point(3.0, 3.0)))

        vertical = convex_hull([(1, 3), (1, 0), (1, 2)])
        self.assertEqual(vertical, (Point(1.0, 0.0), Point(1.0, 3.0)))

    def test_known_rectangle(self):
        pts = [(0, 0), (4, 0), (4, 2), (0, 2)]
        hull = convex_hull(pts)
        self.assertEqual(set(hull), set(as_points(pts)))
        self.assertEqual(hull, (Point(0.0, 0.0), Point(4.0, 0.0), Point(4.0, 2.0), Point(0.0, 2.0)))

    def test_edge_midpoints_and_interior_points_excluded(self):
        pts = [(0, 0), (2, 0), (4, 0), (4, 4), (0, 4), (2, 2), (0, 2), (1, 3)]
        hull = convex_hull(pts)
        self.assertEqual(set(hull), {Point(0.0, 0.0), Point(4.0, 0.0), Point(4.0, 4.0), Point(0.0, 4.0)})

    def test_counter_clockwise_order(self):
        rng = np.random.RandomState(0)
        for _ in range(20):
            hull = convex_hull(rng.randn(30, 2))
            n = len(hull)
            for i in range(n):
                self.assertGreater(turn(hull[i], hull[(i + 1) % n], hull[(i + 2) % n]), 0.0)
            self.assertGreater(polygon_area(hull), 0.0)

    def test_all_points_inside_and_vertices_from_input(self):
        rng = np.random.RandomState(1)
        for n in [3, 4, 10, 50]:
            pts = as_points(rng.rand(n, 2) * 1000.0)
            hull = convex_hull(pts)
            self.assertTrue(set(hull) <= set(pts))
            for p in pts:
                self.assertTrue(inside_or_on(hull, p))

    def test_matches_scipy(self):
        rng = np.random.RandomState(2)
        for _ in range(20):
            arr = rng.randn(40, 2)
            ref = ConvexHull(arr)
            expected = set(as_points(arr[ref.vertices]))
            hull = convex_hull(arr)
            self.assertEqual(set(hull), expected)
            self.assertAlmostEqual(polygon_area(hull), ref.volume)

    def test_idempotent(self):
        rng = np.random.RandomState(3)
        for _ in range(10):
            hull = convex_hull(rng.randn(25, 2))
            self.assertEqual(convex_hull(hull), hull)

    def test_order_independent(self):
        rng = np.random.RandomState(4)
        arr = rng.randn(30, 2)
        shuffled = arr[rng.permutation(len(arr))]
        self.assertEqual(convex_hull(arr), convex_hull(shuffled))

    def test_starts_at_lowest_x(self):
        hull = convex_hull([(3, 1), (-1, 5), (-1, 2), (2, 7)])
        self.assertEqual(hull[0], Point(-1.0, 2.0))


if __name__ == "__main__":
    unittest.main()
