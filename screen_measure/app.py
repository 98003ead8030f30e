# Screen ruler with a system tray entry: pick "Measure", drag lines, ESC to stop.

import gi
gi.require_version('Gtk', '3.0')
gi.require_version('AppIndicator3', '0.1')
from gi.repository import Gtk, AppIndicator3
import os
import sys

from .config import load_config, palette_colors, save_config
from .controller import OverlayController
from .host import ScreenMeasureApp
from .icon import ICON_NAME, ensure_tray_icon
from .overlay import GtkInputSource, OverlayWindow, WindowSurface, call_soon


# ── Measuring Session ──────────────────────────────────────────────────────

class MeasureSession:
	"""One overlay window and the controller driving it."""

	def __init__(self, cfg, on_closed):
		self.window = OverlayWindow(cfg)
		self.controller = OverlayController(
			GtkInputSource(self.window),
			WindowSurface(self.window),
			palette_colors(cfg),
			on_closed,
			call_soon,
		)
		self.window.scene_source = self.controller.scene

	@property
	def closed(self):
		return self.controller.closed

	def show(self):
		self.controller.open()
		self.window.show_all()
		self.window.present()

	def present(self):
		self.window.present()

	def destroy(self):
		self.window.scene_source = None
		self.window.destroy()


# ── System Tray ─────────────────────────────────────────────────────────────

class TrayIcon:
	def __init__(self, app):
		self.app = app

		icon_path = ensure_tray_icon()
		self.indicator = AppIndicator3.Indicator.new(
			"screen-measure",
			ICON_NAME,
			AppIndicator3.IndicatorCategory.APPLICATION_STATUS,
		)
		self.indicator.set_icon_theme_path(os.path.dirname(icon_path))
		self.indicator.set_status(AppIndicator3.IndicatorStatus.ACTIVE)

		menu = Gtk.Menu()

		item_measure = Gtk.MenuItem(label="Measure")
		item_measure.connect("activate", self.on_measure)
		menu.append(item_measure)

		menu.append(Gtk.SeparatorMenuItem())

		item_quit = Gtk.MenuItem(label="Quit")
		item_quit.connect("activate", self.on_quit)
		menu.append(item_quit)

		menu.show_all()
		self.indicator.set_menu(menu)

	def on_measure(self, _item):
		self.app.open_session()

	def on_quit(self, _item):
		Gtk.main_quit()


# ── Main ────────────────────────────────────────────────────────────────────

def main():
	cfg = load_config()
	save_config(cfg)

	app = ScreenMeasureApp(cfg, MeasureSession)
	tray = TrayIcon(app)

	try:
		Gtk.main()
	except KeyboardInterrupt:
		sys.exit(0)
