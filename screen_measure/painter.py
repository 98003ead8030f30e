# Executes renderer draw commands on a cairo context.

import math

import cairo

from .renderer import DrawText, FillCircle, FillRoundedRect, StrokeLine

FONT_FACE = "sans-serif"


def _select_font(cr, size, bold):
	weight = cairo.FONT_WEIGHT_BOLD if bold else cairo.FONT_WEIGHT_NORMAL
	cr.select_font_face(FONT_FACE, cairo.FONT_SLANT_NORMAL, weight)
	cr.set_font_size(size)


class CairoTextMeasurer:
	"""measure_text() backed by a scratch 1x1 surface."""

	def __init__(self):
		self._surface = cairo.ImageSurface(cairo.FORMAT_ARGB32, 1, 1)
		self._cr = cairo.Context(self._surface)

	def __call__(self, text, font_size, bold):
		_select_font(self._cr, font_size, bold)
		ascent, descent = self._cr.font_extents()[:2]
		ext = self._cr.text_extents(text)
		return (ext.x_advance, ascent + descent)


def rounded_rectangle(cr, x, y, w, h, r):
	r = max(0.0, min(r, w / 2, h / 2))
	cr.new_sub_path()
	cr.arc(x + w - r, y + r, r, -math.pi / 2, 0)
	cr.arc(x + w - r, y + h - r, r, 0, math.pi / 2)
	cr.arc(x + r, y + h - r, r, math.pi / 2, math.pi)
	cr.arc(x + r, y + r, r, math.pi, 3 * math.pi / 2)
	cr.close_path()


def paint(cr, commands):
	cr.set_operator(cairo.Operator.OVER)
	for cmd in commands:
		if isinstance(cmd, StrokeLine):
			cr.set_line_width(cmd.width)
			cr.set_line_cap(cairo.LINE_CAP_BUTT)
			cr.set_source_rgba(*cmd.color)
			cr.move_to(*cmd.start)
			cr.line_to(*cmd.end)
			cr.stroke()
		elif isinstance(cmd, FillRoundedRect):
			cr.new_path()
			rounded_rectangle(cr, cmd.x, cmd.y, cmd.width, cmd.height, cmd.radius)
			cr.set_source_rgba(*cmd.color)
			cr.fill()
		elif isinstance(cmd, DrawText):
			_select_font(cr, cmd.font_size, cmd.bold)
			ascent = cr.font_extents()[0]
			cr.set_source_rgba(*cmd.color)
			cr.move_to(cmd.x, cmd.y + ascent)
			cr.show_text(cmd.text)
			cr.new_path()
		elif isinstance(cmd, FillCircle):
			cr.new_path()
			cr.arc(cmd.center[0], cmd.center[1], cmd.radius, 0, 2 * math.pi)
			cr.set_source_rgba(*cmd.color)
			cr.fill()
		else:
			raise TypeError(f"unknown draw command: {cmd!r}")
