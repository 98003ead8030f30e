"""
Input events and the capabilities the overlay controller is built on.

An InputSource delivers events one at a time on the main loop; a Surface is
whatever the scene is painted into.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

KEY_ESCAPE = "Escape"


@dataclass(frozen=True)
class PointerDown:
	x: float
	y: float
	shift: Optional[bool] = None


@dataclass(frozen=True)
class PointerDrag:
	x: float
	y: float
	shift: Optional[bool] = None


@dataclass(frozen=True)
class PointerUp:
	x: float
	y: float
	shift: Optional[bool] = None


@dataclass(frozen=True)
class PointerMove:
	x: float
	y: float
	shift: Optional[bool] = None


@dataclass(frozen=True)
class ModifierChange:
	shift: bool


@dataclass(frozen=True)
class KeyPress:
	key: str


class InputSource(ABC):
	"""Something handlers can be attached to and detached from."""

	@abstractmethod
	def subscribe(self, handler):
		"""Start delivering events to handler; returns a removal token."""
		...

	@abstractmethod
	def unsubscribe(self, token):
		"""Stop delivering events for a token returned by subscribe."""
		...


class Surface(ABC):
	@abstractmethod
	def queue_draw(self):
		...

	@abstractmethod
	def hide(self):
		...


class ListenerSet:
	"""Tokens installed on one InputSource, removed together exactly once."""

	def __init__(self, source):
		self.source = source
		self._tokens = []

	def __len__(self):
		return len(self._tokens)

	def add(self, handler):
		token = self.source.subscribe(handler)
		self._tokens.append(token)
		return token

	def remove_all(self):
		tokens, self._tokens = self._tokens, []
		for token in tokens:
			self.source.unsubscribe(token)
