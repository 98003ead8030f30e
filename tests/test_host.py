import unittest

from screen_measure.host import ScreenMeasureApp


class FakeSession:
	def __init__(self, cfg, on_closed):
		self.cfg = cfg
		self.on_closed = on_closed
		self.closed = False
		self.shown = 0
		self.presented = 0
		self.destroyed = 0

	def show(self):
		self.shown += 1

	def present(self):
		self.presented += 1

	def destroy(self):
		self.destroyed += 1


class ScreenMeasureAppTests(unittest.TestCase):
	def setUp(self):
		self.app = ScreenMeasureApp({"line_width": 3.0}, FakeSession)

	def test_open_creates_and_shows_session(self):
		session = self.app.open_session()
		self.assertIs(self.app.session, session)
		self.assertEqual(session.shown, 1)
		self.assertEqual(session.cfg, {"line_width": 3.0})

	def test_second_open_presents_existing_session(self):
		first = self.app.open_session()
		second = self.app.open_session()
		self.assertIs(first, second)
		self.assertEqual(first.presented, 1)
		self.assertEqual(first.shown, 1)

	def test_close_releases_and_destroys_once(self):
		session = self.app.open_session()
		session.closed = True
		session.on_closed()
		session.on_closed()
		self.assertIsNone(self.app.session)
		self.assertEqual(session.destroyed, 1)

	def test_open_while_closing_starts_fresh_session(self):
		stale = self.app.open_session()
		stale.closed = True
		fresh = self.app.open_session()
		self.assertIsNot(fresh, stale)
		self.assertEqual(stale.presented, 0)
		self.assertIs(self.app.session, fresh)

		# The stale session's deferred callback must leave the new one alone.
		stale.on_closed()
		self.assertEqual(stale.destroyed, 1)
		self.assertEqual(fresh.destroyed, 0)
		self.assertIs(self.app.session, fresh)

	def test_reopen_after_close(self):
		first = self.app.open_session()
		first.closed = True
		first.on_closed()
		second = self.app.open_session()
		self.assertIsNot(first, second)
		self.assertIs(self.app.session, second)


if __name__ == "__main__":
	unittest.main()
