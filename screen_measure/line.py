import math
from dataclasses import dataclass
from typing import Tuple

from .geometry import distance, midpoint

Point = Tuple[float, float]
Color = Tuple[float, float, float, float]

PIXELS_SUFFIX = "px"


@dataclass(frozen=True)
class MeasurementLine:
	"""One committed (or in-progress) measurement."""

	start: Point
	end: Point
	color: Color

	@property
	def distance(self):
		return distance(self.start, self.end)

	@property
	def midpoint(self):
		return midpoint(self.start, self.end)

	@property
	def pixels(self):
		# Half-pixels round up; distance is never negative.
		return int(math.floor(self.distance + 0.5))

	@property
	def label(self):
		return "%d%s" % (self.pixels, PIXELS_SUFFIX)
