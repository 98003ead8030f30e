# Interaction state machine for one measuring session.
#
# Idle --down--> Dragging --up--> Idle, with drag/modifier updates while
# Dragging and pointer-move updates while Idle. Escape closes the session
# from either state.

from dataclasses import dataclass
from typing import Optional, Tuple

from .events import (
	KEY_ESCAPE,
	KeyPress,
	ListenerSet,
	ModifierChange,
	PointerDown,
	PointerDrag,
	PointerMove,
	PointerUp,
)
from .geometry import distance, snap_to_axis
from .line import Color, MeasurementLine, Point

# Below this drag length the press is still treated as a click.
DRAG_THRESHOLD = 5.0


@dataclass(frozen=True)
class DragState:
	anchor: Point
	raw_end: Point
	snapped_end: Point


@dataclass(frozen=True)
class Scene:
	"""Everything the renderer needs, detached from the controller."""

	lines: Tuple[MeasurementLine, ...]
	current_line: Optional[MeasurementLine]
	cursor_position: Optional[Point]
	cursor_color: Color


class OverlayController:
	def __init__(self, input_source, surface, palette, on_closed, schedule):
		if not palette:
			raise ValueError("palette must contain at least one color")
		self.surface = surface
		self.palette = tuple(tuple(c) for c in palette)
		self._on_closed = on_closed
		self._schedule = schedule
		self._listeners = ListenerSet(input_source)

		self.lines = []
		self.active_drag = None
		self.color_cursor = 0
		self.cursor_position = None
		self.modifier_snap_active = False
		self.closed = False

		self._handlers = {
			PointerDown: self._on_pointer_down,
			PointerDrag: self._on_pointer_drag,
			PointerUp: self._on_pointer_up,
			PointerMove: self._on_pointer_move,
			ModifierChange: self._on_modifier_change,
			KeyPress: self._on_key_press,
		}

	def open(self):
		if self.closed or len(self._listeners):
			return
		self._listeners.add(self.dispatch)

	@property
	def current_color(self):
		return self.palette[self.color_cursor % len(self.palette)]

	@property
	def current_end(self):
		if self.active_drag is None:
			return None
		return self.active_drag.snapped_end

	def dispatch(self, event):
		"""Apply one input event. Returns True when a redraw was requested."""
		if self.closed:
			return False
		handler = self._handlers.get(type(event))
		if handler is None:
			return False
		changed = handler(event)
		if changed:
			self.surface.queue_draw()
		return changed

	def scene(self):
		current = None
		if self.active_drag is not None:
			current = MeasurementLine(
				self.active_drag.anchor, self.active_drag.snapped_end,
				self.current_color)
		return Scene(
			lines=tuple(self.lines),
			current_line=current,
			cursor_position=self.cursor_position,
			cursor_color=self.current_color,
		)

	def close(self):
		if self.closed:
			return
		self.closed = True
		self.active_drag = None
		self._listeners.remove_all()
		self.surface.hide()
		# The caller may still be inside one of the listeners just removed.
		self._schedule(self._on_closed)

	# ── Transitions ────────────────────────────────────────────────────────

	def _track_shift(self, event):
		if event.shift is not None:
			self.modifier_snap_active = event.shift

	def _end_point(self, anchor, raw):
		if self.modifier_snap_active:
			return snap_to_axis(anchor, raw)
		return raw

	def _on_pointer_down(self, event):
		self._track_shift(event)
		p = (event.x, event.y)
		self.active_drag = DragState(p, p, p)
		self.cursor_position = p
		return True

	def _on_pointer_drag(self, event):
		self._track_shift(event)
		drag = self.active_drag
		if drag is None:
			return False
		raw = (event.x, event.y)
		end = self._end_point(drag.anchor, raw)
		self.active_drag = DragState(drag.anchor, raw, end)
		if distance(drag.anchor, end) >= DRAG_THRESHOLD:
			self.cursor_position = None
		else:
			self.cursor_position = drag.anchor
		return True

	def _on_modifier_change(self, event):
		self.modifier_snap_active = event.shift
		drag = self.active_drag
		if drag is None:
			return False
		end = self._end_point(drag.anchor, drag.raw_end)
		self.active_drag = DragState(drag.anchor, drag.raw_end, end)
		return True

	def _on_pointer_up(self, event):
		self._track_shift(event)
		drag = self.active_drag
		if drag is None:
			return False
		self.lines.append(
			MeasurementLine(drag.anchor, drag.snapped_end, self.current_color))
		self.color_cursor += 1
		self.active_drag = None
		self.cursor_position = (event.x, event.y)
		return True

	def _on_pointer_move(self, event):
		self._track_shift(event)
		if self.active_drag is not None:
			return False
		self.cursor_position = (event.x, event.y)
		return True

	def _on_key_press(self, event):
		if event.key == KEY_ESCAPE:
			self.close()
		return False
