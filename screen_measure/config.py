import json
import os
import sys

# ── Config ──────────────────────────────────────────────────────────────────

CONFIG_DIR = os.path.join(os.path.expanduser("~"), ".config", "screen-measure")
CONFIG_FILE = os.path.join(CONFIG_DIR, "config.json")

DEFAULT_PALETTE = [
	[0.0, 1.0, 1.0],
	[1.0, 0.3, 0.3],
	[0.3, 1.0, 0.3],
	[1.0, 0.5, 0.0],
	[1.0, 0.3, 1.0],
]

DEFAULTS = {
	"line_width": 3.0,
	"line_opacity": 1.0,
	"palette": DEFAULT_PALETTE,
	"label_font_size": 14.0,
	"label_padding": 6.0,
	"label_margin": 8.0,
	"label_radius": 4.0,
	"label_background_color": [0.0, 0.0, 0.0],
	"label_background_opacity": 0.7,
	"notice_text": "ESC to Stop",
	"notice_font_size": 16.0,
	"notice_padding": 20.0,
	"notice_top_margin": 50.0,
	"notice_radius": 8.0,
	"notice_text_color": [1.0, 1.0, 1.0],
	"notice_background_color": [0.0, 0.0, 0.0],
	"notice_background_opacity": 0.5,
	"dot_diameter": 5.0,
	"hide_cursor": True,
}


def warn(message):
	print(f"screen-measure: {message}", file=sys.stderr)


def _is_number(value):
	return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_rgb(value):
	return (isinstance(value, list) and len(value) == 3
		and all(_is_number(c) for c in value))


def _valid_palette(palette):
	if not isinstance(palette, list) or not palette:
		return False
	return all(_is_rgb(color) for color in palette)


def _valid_value(default, value):
	if isinstance(default, bool):
		return isinstance(value, bool)
	if _is_number(default):
		return _is_number(value)
	if isinstance(default, str):
		return isinstance(value, str)
	return _is_rgb(value)


def load_config(path=None):
	path = path or CONFIG_FILE
	try:
		with open(path, "r") as f:
			cfg = json.load(f)
	except FileNotFoundError:
		return dict(DEFAULTS)
	except (OSError, json.JSONDecodeError) as e:
		warn(f"ignoring unreadable config {path}: {e}")
		return dict(DEFAULTS)
	if not isinstance(cfg, dict):
		warn(f"ignoring config {path}: expected a JSON object")
		return dict(DEFAULTS)
	merged = dict(DEFAULTS)
	merged.update(cfg)
	if not _valid_palette(merged["palette"]):
		warn("palette must be a non-empty list of [r, g, b]; using defaults")
		merged["palette"] = DEFAULT_PALETTE
	for key, default in DEFAULTS.items():
		if key == "palette":
			continue
		if not _valid_value(default, merged[key]):
			warn(f"invalid value for {key!r}: {merged[key]!r}; using {default!r}")
			merged[key] = default
	return merged


def save_config(cfg, path=None):
	path = path or CONFIG_FILE
	try:
		os.makedirs(os.path.dirname(path), exist_ok=True)
		with open(path, "w") as f:
			json.dump(cfg, f, indent=2)
	except OSError as e:
		warn(f"failed to save config: {e}")


def palette_colors(cfg):
	"""Configured palette as cairo RGBA tuples."""
	opacity = cfg["line_opacity"]
	return [(r, g, b, opacity) for r, g, b in cfg["palette"]]
