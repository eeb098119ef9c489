# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Any, Optional

from yaml import YAMLError, dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from streakboard import configuration, time
from streakboard.errors import StoreError
from streakboard.model.session import Session


class SessionRepository:
    def __init__(self, path: Optional[Path] = None) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        if self._path is not None:
            return self._path
        return configuration.DATA_SESSION_PATH

    def get_session(self) -> Optional[Session]:
        if not self.path.is_file():
            return None
        try:
            raw_session = load(self.path.read_text(), Loader=Loader)
        except (OSError, YAMLError) as e:
            raise StoreError(f"cannot read {self.path}: {e}") from e
        if raw_session is None:
            return None
        return self.__convert_session_for_deserialization(raw_session)

    def save_session(self, session: Session) -> None:
        serializable_session: dict[str, Any] = {
            "user_id": session["user_id"],
            "email": session["email"],
            "signed_in": time.datetime_to_iso_str(session["signed_in"]),
        }
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(dump(serializable_session, Dumper=Dumper))
        except OSError as e:
            raise StoreError(f"cannot write {self.path}: {e}") from e

    def clear_session(self) -> None:
        try:
            self.path.unlink(missing_ok=True)
        except OSError as e:
            raise StoreError(f"cannot remove {self.path}: {e}") from e

    def __convert_session_for_deserialization(self, session: Any) -> Session:
        try:
            return {
                "user_id": str(session["user_id"]),
                "email": str(session["email"]),
                "signed_in": time.datetime_from_str(session["signed_in"]),
            }
        except (KeyError, TypeError, ValueError) as e:
            raise StoreError(f"malformed session in {self.path}: {e}") from e


SESSION_REPO = SessionRepository()
