import sys
import unittest

try:
	import cairo
except ImportError:
	cairo = None

from screen_measure.controller import Scene
from screen_measure.line import MeasurementLine
from screen_measure.renderer import FillCircle, RenderStyle, render

CYAN = (0.0, 1.0, 1.0, 1.0)


@unittest.skipIf(cairo is None, "pycairo not available")
class PainterTests(unittest.TestCase):
	def setUp(self):
		from screen_measure.painter import CairoTextMeasurer, paint
		self.measure_text = CairoTextMeasurer()
		self.paint = paint
		self.surface = cairo.ImageSurface(cairo.FORMAT_ARGB32, 400, 300)
		self.cr = cairo.Context(self.surface)

	def alpha_at(self, x, y):
		self.surface.flush()
		stride = self.surface.get_stride()
		data = self.surface.get_data()
		# ARGB32 is native-endian; alpha is the high byte.
		pixel = int.from_bytes(bytes(data[y * stride + x * 4:y * stride + x * 4 + 4]),
			sys.byteorder)
		return pixel >> 24

	def test_measure_text_grows_with_text(self):
		w1, h1 = self.measure_text("1px", 14, False)
		w2, h2 = self.measure_text("1000px", 14, False)
		self.assertGreater(w2, w1)
		self.assertEqual(h1, h2)
		self.assertGreater(h1, 0)

	def test_paints_line_and_dot(self):
		line = MeasurementLine((100, 200), (300, 200), CYAN)
		scene = Scene(lines=(line,), current_line=None,
			cursor_position=(350, 250), cursor_color=CYAN)
		self.paint(self.cr, render(scene, RenderStyle(), self.measure_text))
		self.assertGreater(self.alpha_at(200, 200), 0)
		self.assertGreater(self.alpha_at(350, 250), 0)
		self.assertEqual(self.alpha_at(390, 10), 0)

	def test_unknown_command_rejected(self):
		with self.assertRaises(TypeError):
			self.paint(self.cr, [FillCircle((1, 1), 1, CYAN), "bogus"])


if __name__ == "__main__":
	unittest.main()
