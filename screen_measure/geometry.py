# Plane geometry for measurement lines. Points are (x, y) tuples in
# surface coordinates (origin top-left, y growing downwards).

import math


def distance(a, b):
	return math.hypot(b[0] - a[0], b[1] - a[1])


def midpoint(a, b):
	return ((a[0] + b[0]) / 2, (a[1] + b[1]) / 2)


def unit_perpendicular(a, b):
	dx = b[0] - a[0]
	dy = b[1] - a[1]
	length = math.hypot(dx, dy)
	if length == 0:
		return None
	return (-dy / length, dx / length)


def snap_to_axis(anchor, p):
	"""Lock p to the horizontal or vertical through anchor, whichever is closer.

	Ties lock vertically.
	"""
	dx = abs(p[0] - anchor[0])
	dy = abs(p[1] - anchor[1])
	if dx > dy:
		return (p[0], anchor[1])
	return (anchor[0], p[1])


def label_center(start, end, box_width, box_height, line_width, margin):
	"""Center of a label box pushed off the line along its perpendicular.

	The half-box is projected onto the perpendicular so the box clears the
	stroke by `margin` whatever the line's angle.
	"""
	mid = midpoint(start, end)
	perp = unit_perpendicular(start, end)
	if perp is None:
		return mid
	px, py = perp
	base = abs(px) * box_width / 2 + abs(py) * box_height / 2
	offset = base + line_width / 2 + margin
	return (mid[0] + px * offset, mid[1] + py * offset)
