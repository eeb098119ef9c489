import tempfile
import unittest
from pathlib import Path
from typing import Optional
from unittest import mock

from fakes import TODAY, InMemoryTaskStore
from streakboard.errors import StoreError
from streakboard.model.session import AuthEvent, Session
from streakboard.repository.session import SessionRepository
from streakboard.service.auth import AuthContext, AuthValidationError
from streakboard.service.board import StreakBoard


class TestAuthContext(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.repository = SessionRepository(Path(self._tmp.name) / "session.yaml")

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_no_session_initially(self) -> None:
        auth = AuthContext(self.repository)

        self.assertIsNone(auth.init())
        self.assertIsNone(auth.session)

    def test_sign_in_persists_session(self) -> None:
        session = AuthContext(self.repository).sign_in(" user@example.com ")

        restored = AuthContext(self.repository).init()

        self.assertIsNotNone(restored)
        self.assertEqual(restored["email"], "user@example.com")  # type: ignore[index]
        self.assertEqual(restored["user_id"], session["user_id"])  # type: ignore[index]

    def test_same_email_same_user_id(self) -> None:
        auth = AuthContext(self.repository)

        first = auth.sign_in("user@example.com")
        auth.sign_out()
        second = auth.sign_in("User@Example.com")
        other = auth.sign_in("someone@example.com")

        self.assertEqual(first["user_id"], second["user_id"])
        self.assertNotEqual(first["user_id"], other["user_id"])

    def test_invalid_email_is_rejected(self) -> None:
        auth = AuthContext(self.repository)

        for email in ["", "nobody", "@example.com", "user@"]:
            with self.assertRaises(AuthValidationError):
                auth.sign_in(email)
        self.assertIsNone(auth.init())

    def test_listeners_receive_events_until_unsubscribed(self) -> None:
        auth = AuthContext(self.repository)
        events: list[tuple[AuthEvent, Optional[Session]]] = []
        unsubscribe = auth.subscribe(lambda event, session: events.append((event, session)))

        auth.sign_in("user@example.com")
        auth.sign_out()
        unsubscribe()
        auth.sign_in("user@example.com")

        self.assertEqual([event for event, _ in events], ["SIGNED_IN", "SIGNED_OUT"])
        self.assertIsNotNone(events[0][1])
        self.assertIsNone(events[1][1])

    def test_sign_out_unmounts_board(self) -> None:
        auth = AuthContext(self.repository)
        session = auth.sign_in("user@example.com")
        board = StreakBoard(session, InMemoryTaskStore(), auth=auth, clock=lambda: TODAY)
        board.mount()

        auth.sign_out()

        self.assertFalse(board.mounted)
        self.assertIsNone(auth.session)

    def test_remounted_board_follows_user_switch(self) -> None:
        auth = AuthContext(self.repository)
        session = auth.sign_in("user@example.com")
        board = StreakBoard(session, InMemoryTaskStore(), auth=auth, clock=lambda: TODAY)
        board.mount()
        board.unmount()
        board.mount()

        auth.sign_in("someone@example.com")

        self.assertFalse(board.mounted)

    def test_failed_sign_out_raises_store_error_and_keeps_session(self) -> None:
        auth = AuthContext(self.repository)
        auth.sign_in("user@example.com")
        events: list[AuthEvent] = []
        auth.subscribe(lambda event, session: events.append(event))

        with mock.patch.object(Path, "unlink", side_effect=OSError("busy")):
            with self.assertRaises(StoreError):
                auth.sign_out()

        self.assertIsNotNone(auth.session)
        self.assertEqual(events, [])
        self.assertIsNotNone(AuthContext(self.repository).init())

    def test_clearing_a_missing_session_is_allowed(self) -> None:
        self.repository.clear_session()

        self.assertIsNone(self.repository.get_session())
