"""Ruler glyph used for the tray icon and the packaged .ico."""

import os

from PIL import Image, ImageDraw

from .config import CONFIG_DIR

ICON_NAME = "screen-measure-icon"
ICON_FILE = os.path.join(CONFIG_DIR, ICON_NAME + ".svg")

# Strokes on an 18px grid, y down: two uprights and a V between them.
GRID = 18.0
STROKE_WIDTH = 3.0
RULER_STROKES = [
	((2.0, 8.0), (2.0, 15.0)),
	((4.175, 4.65), (7.325, 8.5)),
	((10.675, 8.5), (13.825, 4.65)),
	((16.0, 8.0), (16.0, 15.0)),
]


def ruler_icon_svg(size=48, color="#ddd"):
	s = size / GRID
	parts = [
		'<svg xmlns="http://www.w3.org/2000/svg" width="%d" height="%d" '
		'viewBox="0 0 %d %d">' % (size, size, size, size)
	]
	for (x1, y1), (x2, y2) in RULER_STROKES:
		parts.append(
			'<line x1="%.2f" y1="%.2f" x2="%.2f" y2="%.2f" stroke="%s" '
			'stroke-width="%.2f" stroke-linecap="round"/>'
			% (x1 * s, y1 * s, x2 * s, y2 * s, color, STROKE_WIDTH * s))
	parts.append('</svg>')
	return "".join(parts)


def create_ruler_image(size, color=(221, 221, 221, 255)):
	img = Image.new("RGBA", (size, size), (0, 0, 0, 0))
	draw = ImageDraw.Draw(img)

	s = size / GRID
	lw = max(1, int(round(STROKE_WIDTH * s)))
	cap = lw / 2

	for (x1, y1), (x2, y2) in RULER_STROKES:
		p1 = (x1 * s, y1 * s)
		p2 = (x2 * s, y2 * s)
		draw.line([p1, p2], fill=color, width=lw)
		# Round caps
		for cx, cy in (p1, p2):
			draw.ellipse([cx - cap, cy - cap, cx + cap, cy + cap], fill=color)

	return img


def ensure_tray_icon():
	if os.path.exists(ICON_FILE):
		return ICON_FILE
	os.makedirs(CONFIG_DIR, exist_ok=True)
	with open(ICON_FILE, "w") as f:
		f.write(ruler_icon_svg())
	return ICON_FILE


def main():
	sizes = [16, 24, 32, 48, 64, 128, 256]
	images = [create_ruler_image(s) for s in sizes]

	images[-1].save(
		"screen-measure.ico",
		format="ICO",
		sizes=[(s, s) for s in sizes],
		append_images=images[:-1])
	print(f"Created screen-measure.ico with sizes: {sizes}")


if __name__ == "__main__":
	main()
