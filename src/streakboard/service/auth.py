# SPDX-License-Identifier: MIT

import logging
from typing import Callable, Optional

from streakboard.model.entity_id import user_id_for_email
from streakboard.model.session import AuthEvent, Session
from streakboard.repository.session import SessionRepository
from streakboard.time import now_utc

logger = logging.getLogger(__name__)

AuthListener = Callable[[AuthEvent, Optional[Session]], None]


class AuthValidationError(Exception):
    """Raised when sign-in input is invalid."""

    pass


class AuthContext:
    """
    Session state for one process, passed to whatever needs it.

    Call init() before reading `session`. Listeners registered with
    subscribe() are told about every sign in and sign out; the returned
    callable removes the listener again.
    """

    def __init__(self, repository: SessionRepository) -> None:
        self._repository = repository
        self._session: Optional[Session] = None
        self._listeners: list[AuthListener] = []

    @property
    def session(self) -> Optional[Session]:
        return self._session

    def init(self) -> Optional[Session]:
        self._session = self._repository.get_session()
        return self._session

    def subscribe(self, listener: AuthListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def sign_in(self, email: str) -> Session:
        email = email.strip()
        if "@" not in email or email.startswith("@") or email.endswith("@"):
            raise AuthValidationError(f"Invalid email address: '{email}'")

        session: Session = {
            "user_id": user_id_for_email(email),
            "email": email,
            "signed_in": now_utc(),
        }
        self._repository.save_session(session)
        self._session = session
        logger.info("signed in as %s", email)
        self.__notify("SIGNED_IN")
        return session

    def sign_out(self) -> None:
        self._repository.clear_session()
        self._session = None
        logger.info("signed out")
        self.__notify("SIGNED_OUT")

    def __notify(self, event: AuthEvent) -> None:
        for listener in list(self._listeners):
            listener(event, self._session)
