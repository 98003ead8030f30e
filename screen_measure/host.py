# Host-side ownership of the measuring overlay.


class ScreenMeasureApp:
	"""Owns at most one open session and drops it once the session closes.

	`session_factory(cfg, on_closed)` builds a session exposing show(),
	present(), destroy() and a `closed` flag.
	"""

	def __init__(self, cfg, session_factory):
		self.cfg = cfg
		self.session_factory = session_factory
		self.session = None

	def open_session(self):
		current = self.session
		if current is not None and not current.closed:
			current.present()
			return current

		# A session that has seen ESC but not yet run its close callback is
		# replaced; its callback still destroys it.
		session = None
		released = False

		def on_closed():
			nonlocal released
			if released:
				return
			released = True
			self._release_session(session)

		session = self.session_factory(self.cfg, on_closed)
		self.session = session
		session.show()
		return session

	def _release_session(self, session):
		if self.session is session:
			self.session = None
		session.destroy()
