import os
import tempfile
import unittest
from unittest import mock

from screen_measure import icon


class IconTests(unittest.TestCase):
	def test_image_sizes(self):
		for size in (16, 48, 256):
			img = icon.create_ruler_image(size)
			self.assertEqual(img.size, (size, size))
			self.assertEqual(img.mode, "RGBA")
			self.assertIsNotNone(img.getbbox())

	def test_corners_stay_transparent(self):
		img = icon.create_ruler_image(64)
		self.assertEqual(img.getpixel((0, 0))[3], 0)
		self.assertEqual(img.getpixel((63, 63))[3], 0)

	def test_svg_has_one_line_per_stroke(self):
		svg = icon.ruler_icon_svg()
		self.assertTrue(svg.startswith("<svg"))
		self.assertEqual(svg.count("<line"), len(icon.RULER_STROKES))

	def test_tray_icon_written_once(self):
		with tempfile.TemporaryDirectory() as tmp:
			path = os.path.join(tmp, "icon.svg")
			with mock.patch.object(icon, "ICON_FILE", path), \
					mock.patch.object(icon, "CONFIG_DIR", tmp):
				self.assertEqual(icon.ensure_tray_icon(), path)
				with open(path, "w") as f:
					f.write("custom")
				icon.ensure_tray_icon()
			with open(path) as f:
				self.assertEqual(f.read(), "custom")


if __name__ == "__main__":
	unittest.main()
