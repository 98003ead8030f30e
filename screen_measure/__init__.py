"""
Screen Measure

A full-screen transparent ruler overlay: drag to measure pixel distances,
hold Shift to lock to an axis, press ESC to stop.
"""

from .controller import OverlayController, Scene
from .line import MeasurementLine
from .renderer import RenderStyle, render

__version__ = "0.1.0"

__all__ = [
	"MeasurementLine",
	"OverlayController",
	"RenderStyle",
	"Scene",
	"render",
]
