"""
Scene renderer - turns a controller Scene into backend-neutral draw commands.

Layers, back to front:
    1. help notice
    2. committed lines with their labels, oldest first
    3. the in-progress line with its label
    4. the cursor dot
"""

from dataclasses import dataclass

from .geometry import label_center
from .line import Color, Point

# Lines shorter than this get no label.
MIN_LABEL_DISTANCE = 5.0


@dataclass(frozen=True)
class StrokeLine:
	start: Point
	end: Point
	width: float
	color: Color


@dataclass(frozen=True)
class FillRoundedRect:
	x: float
	y: float
	width: float
	height: float
	radius: float
	color: Color


@dataclass(frozen=True)
class DrawText:
	"""Text whose extents box has its top-left corner at (x, y)."""

	text: str
	x: float
	y: float
	font_size: float
	bold: bool
	color: Color


@dataclass(frozen=True)
class FillCircle:
	center: Point
	radius: float
	color: Color


def _rgba(rgb, opacity):
	r, g, b = rgb
	return (r, g, b, opacity)


@dataclass(frozen=True)
class RenderStyle:
	line_width: float = 3.0
	label_font_size: float = 14.0
	label_padding: float = 6.0
	label_margin: float = 8.0
	label_radius: float = 4.0
	label_background: Color = (0.0, 0.0, 0.0, 0.7)
	notice_text: str = "ESC to Stop"
	notice_font_size: float = 16.0
	notice_padding: float = 20.0
	notice_top_margin: float = 50.0
	notice_radius: float = 8.0
	notice_text_color: Color = (1.0, 1.0, 1.0, 1.0)
	notice_background: Color = (0.0, 0.0, 0.0, 0.5)
	dot_diameter: float = 5.0

	@classmethod
	def from_config(cls, cfg):
		return cls(
			line_width=cfg["line_width"],
			label_font_size=cfg["label_font_size"],
			label_padding=cfg["label_padding"],
			label_margin=cfg["label_margin"],
			label_radius=cfg["label_radius"],
			label_background=_rgba(
				cfg["label_background_color"], cfg["label_background_opacity"]),
			notice_text=cfg["notice_text"],
			notice_font_size=cfg["notice_font_size"],
			notice_padding=cfg["notice_padding"],
			notice_top_margin=cfg["notice_top_margin"],
			notice_radius=cfg["notice_radius"],
			notice_text_color=_rgba(cfg["notice_text_color"], 1.0),
			notice_background=_rgba(
				cfg["notice_background_color"], cfg["notice_background_opacity"]),
			dot_diameter=cfg["dot_diameter"],
		)


def notice_commands(style, measure_text):
	text = style.notice_text
	if not text:
		return []
	tw, th = measure_text(text, style.notice_font_size, True)
	pad = style.notice_padding
	x = pad
	y = style.notice_top_margin
	return [
		FillRoundedRect(x, y, tw + pad * 2, th + pad * 2,
			style.notice_radius, style.notice_background),
		DrawText(text, x + pad, y + pad, style.notice_font_size, True,
			style.notice_text_color),
	]


def label_rect(line, text_size, style):
	"""(x, y, width, height) of the label box for a line."""
	tw, th = text_size
	pad = style.label_padding
	width = tw + pad * 2
	height = th + pad * 2
	cx, cy = label_center(line.start, line.end, width, height,
		style.line_width, style.label_margin)
	return (cx - width / 2, cy - height / 2, width, height)


def line_commands(line, style, measure_text):
	commands = [StrokeLine(line.start, line.end, style.line_width, line.color)]
	if line.distance < MIN_LABEL_DISTANCE:
		return commands

	text = line.label
	size = measure_text(text, style.label_font_size, False)
	x, y, width, height = label_rect(line, size, style)
	pad = style.label_padding
	commands.append(FillRoundedRect(x, y, width, height,
		style.label_radius, style.label_background))
	commands.append(DrawText(text, x + pad, y + pad,
		style.label_font_size, False, line.color))
	return commands


def render(scene, style, measure_text):
	commands = notice_commands(style, measure_text)
	for line in scene.lines:
		commands.extend(line_commands(line, style, measure_text))
	if scene.current_line is not None:
		commands.extend(line_commands(scene.current_line, style, measure_text))
	if scene.cursor_position is not None:
		commands.append(FillCircle(scene.cursor_position,
			style.dot_diameter / 2, scene.cursor_color))
	return commands
