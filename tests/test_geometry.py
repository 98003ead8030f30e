import itertools
import unittest

from screen_measure.geometry import (
	distance,
	label_center,
	midpoint,
	snap_to_axis,
	unit_perpendicular,
)

POINTS = [(0, 0), (3, 4), (-7, 2), (10, 10), (5, -12), (0.5, 2.25)]


class DistanceTests(unittest.TestCase):
	def test_symmetric(self):
		for a, b in itertools.product(POINTS, repeat=2):
			self.assertEqual(distance(a, b), distance(b, a))

	def test_zero_for_same_point(self):
		for a in POINTS:
			self.assertEqual(distance(a, a), 0)

	def test_euclidean(self):
		self.assertEqual(distance((0, 0), (3, 4)), 5)


class MidpointTests(unittest.TestCase):
	def test_symmetric_and_halfway(self):
		for a, b in itertools.product(POINTS, repeat=2):
			m = midpoint(a, b)
			self.assertEqual(m, midpoint(b, a))
			self.assertAlmostEqual(m[0] - a[0], b[0] - m[0])
			self.assertAlmostEqual(m[1] - a[1], b[1] - m[1])


class SnapTests(unittest.TestCase):
	def test_horizontal_lock(self):
		self.assertEqual(snap_to_axis((0, 0), (10, 3)), (10, 0))

	def test_vertical_lock(self):
		self.assertEqual(snap_to_axis((0, 0), (3, 10)), (0, 10))

	def test_tie_locks_vertically(self):
		self.assertEqual(snap_to_axis((0, 0), (10, 10)), (0, 10))
		self.assertEqual(snap_to_axis((5, 5), (0, 0)), (5, 0))

	def test_idempotent(self):
		for a, b in itertools.product(POINTS, repeat=2):
			once = snap_to_axis(a, b)
			self.assertEqual(snap_to_axis(a, once), once)

	def test_keeps_one_anchor_coordinate(self):
		for a, b in itertools.product(POINTS, repeat=2):
			r = snap_to_axis(a, b)
			self.assertTrue(r[0] == a[0] or r[1] == a[1])


class LabelCenterTests(unittest.TestCase):
	def test_unit_perpendicular(self):
		self.assertEqual(unit_perpendicular((0, 0), (100, 0)), (0.0, 1.0))
		self.assertEqual(unit_perpendicular((0, 0), (0, 100)), (-1.0, 0.0))
		self.assertIsNone(unit_perpendicular((4, 4), (4, 4)))

	def test_horizontal_line_offsets_vertically(self):
		cx, cy = label_center((0, 0), (100, 0), 40, 20, 3, 8)
		self.assertEqual(cx, 50)
		self.assertEqual(cy, 10 + 1.5 + 8)

	def test_vertical_line_offsets_horizontally(self):
		cx, cy = label_center((0, 0), (0, 100), 40, 20, 3, 8)
		self.assertEqual(cy, 50)
		self.assertEqual(cx, -(20 + 1.5 + 8))

	def test_zero_length_line_centers_on_midpoint(self):
		self.assertEqual(label_center((7, 9), (7, 9), 40, 20, 3, 8), (7, 9))


if __name__ == "__main__":
	unittest.main()
