import gi
gi.require_version('Gtk', '3.0')
gi.require_version('Gdk', '3.0')
from gi.repository import Gtk, Gdk, GLib
import cairo

from .config import warn
from .events import (
	KEY_ESCAPE,
	InputSource,
	KeyPress,
	ModifierChange,
	PointerDown,
	PointerDrag,
	PointerMove,
	PointerUp,
	Surface,
)
from .painter import CairoTextMeasurer, paint
from .renderer import RenderStyle, render

SHIFT_KEYS = (Gdk.KEY_Shift_L, Gdk.KEY_Shift_R)


def call_soon(callback):
	"""Run callback once on the next main loop iteration."""
	def run():
		callback()
		return False
	GLib.idle_add(run)


def _shift(state):
	return bool(state & Gdk.ModifierType.SHIFT_MASK)


# ── Overlay Window ─────────────────────────────────────────────────────────

class OverlayWindow(Gtk.Window):
	def __init__(self, cfg):
		super().__init__(title="Screen Measure")

		self.set_decorated(False)
		self.set_resizable(False)
		self.set_keep_above(True)
		self.set_type_hint(Gdk.WindowTypeHint.DOCK)
		self.set_skip_taskbar_hint(True)
		self.set_skip_pager_hint(True)
		self.set_accept_focus(True)

		display = Gdk.Display.get_default()
		monitor = display.get_primary_monitor() or display.get_monitor(0)
		geo = monitor.get_geometry()
		self.full_width = geo.width
		self.full_height = geo.height
		self.set_default_size(self.full_width, self.full_height)
		self.move(geo.x, geo.y)

		self.set_app_paintable(True)
		visual = self.get_screen().get_rgba_visual()
		if visual:
			self.set_visual(visual)
		else:
			warn("no RGBA visual available, overlay will be opaque")

		self.add_events(
			Gdk.EventMask.BUTTON_PRESS_MASK |
			Gdk.EventMask.BUTTON_RELEASE_MASK |
			Gdk.EventMask.POINTER_MOTION_MASK |
			Gdk.EventMask.KEY_PRESS_MASK |
			Gdk.EventMask.KEY_RELEASE_MASK)

		self.hide_cursor = cfg["hide_cursor"]
		self.style = RenderStyle.from_config(cfg)
		self.measure_text = CairoTextMeasurer()
		self.scene_source = None
		self._seat = None

		self.connect("draw", self.on_draw)
		self.connect("map-event", self.on_map)

	def on_map(self, *_args):
		gdk_win = self.get_window()
		if gdk_win is None:
			return False
		display = Gdk.Display.get_default()
		cursor_name = "none" if self.hide_cursor else "crosshair"
		cursor = Gdk.Cursor.new_from_name(display, cursor_name)
		gdk_win.set_cursor(cursor)
		gdk_win.focus(Gdk.CURRENT_TIME)

		seat = display.get_default_seat()
		status = seat.grab(gdk_win, Gdk.SeatCapabilities.ALL, True,
			cursor, None, None, None)
		if status == Gdk.GrabStatus.SUCCESS:
			self._seat = seat
		else:
			warn(f"could not grab pointer and keyboard ({status.value_nick})")
		return False

	def release_input(self):
		if self._seat is not None:
			self._seat.ungrab()
			self._seat = None
		gdk_win = self.get_window()
		if gdk_win:
			gdk_win.set_cursor(None)

	def on_draw(self, widget, cr):
		cr.set_source_rgba(0, 0, 0, 0)
		cr.set_operator(cairo.Operator.SOURCE)
		cr.paint()

		if self.scene_source is None:
			return True

		paint(cr, render(self.scene_source(), self.style, self.measure_text))
		return True


class WindowSurface(Surface):
	def __init__(self, window):
		self.window = window

	def queue_draw(self):
		self.window.queue_draw()

	def hide(self):
		self.window.release_input()
		self.window.hide()


# ── Input ──────────────────────────────────────────────────────────────────

class GtkInputSource(InputSource):
	"""Translates a widget's pointer and key signals into overlay events."""

	def __init__(self, widget):
		self.widget = widget
		self._shift_keys = set()

	def subscribe(self, handler):
		return (
			self.widget.connect("button-press-event", self._on_button_press, handler),
			self.widget.connect("button-release-event", self._on_button_release, handler),
			self.widget.connect("motion-notify-event", self._on_motion, handler),
			self.widget.connect("key-press-event", self._on_key_press, handler),
			self.widget.connect("key-release-event", self._on_key_release, handler),
		)

	def unsubscribe(self, token):
		for handler_id in token:
			if self.widget.handler_is_connected(handler_id):
				self.widget.disconnect(handler_id)

	def _on_button_press(self, widget, event, handler):
		# Double and triple clicks arrive as extra press events.
		if event.button != 1 or event.type != Gdk.EventType.BUTTON_PRESS:
			return True
		handler(PointerDown(event.x, event.y, _shift(event.state)))
		return True

	def _on_button_release(self, widget, event, handler):
		if event.button != 1:
			return True
		handler(PointerUp(event.x, event.y, _shift(event.state)))
		return True

	def _on_motion(self, widget, event, handler):
		shift = _shift(event.state)
		if event.state & Gdk.ModifierType.BUTTON1_MASK:
			handler(PointerDrag(event.x, event.y, shift))
		else:
			handler(PointerMove(event.x, event.y, shift))
		return True

	def _on_key_press(self, widget, event, handler):
		if event.keyval == Gdk.KEY_Escape:
			handler(KeyPress(KEY_ESCAPE))
		elif event.keyval in SHIFT_KEYS:
			self._shift_keys.add(event.keyval)
			handler(ModifierChange(True))
		return True

	def _on_key_release(self, widget, event, handler):
		if event.keyval in SHIFT_KEYS:
			# Snapping stays on while the other Shift key is still down.
			self._shift_keys.discard(event.keyval)
			handler(ModifierChange(bool(self._shift_keys)))
		return True
