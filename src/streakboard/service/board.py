# SPDX-License-Identifier: MIT

import logging
from typing import Callable, Optional

import pendulum

from streakboard.errors import FetchFailure, OutOfWindowWrite, StreakError, WriteFailure
from streakboard.model.board import BoardSnapshot
from streakboard.model.day import Window
from streakboard.model.entity_id import EntityId
from streakboard.model.interaction import InteractionState
from streakboard.model.session import AuthEvent, Session
from streakboard.service import interaction
from streakboard.service.aggregate import TaskStore, append_task, fetch_window
from streakboard.service.auth import AuthContext
from streakboard.service.window import find_day, generate_window, is_current
from streakboard.time import date_to_iso_str, today_local

logger = logging.getLogger(__name__)


class StreakBoard:
    """
    Per-user state behind the heatmap view.

    Holds the current window, the loading and error flags, the hover and
    selection state, and the pending input text. Every change to the window
    replaces it with a new list, so a caller holding an older window keeps
    seeing the older data.

    Loads and appends are tagged with a generation number; a result that
    arrives after unmount() or after a newer load is dropped.
    """

    def __init__(
        self,
        session: Session,
        store: TaskStore,
        auth: Optional[AuthContext] = None,
        clock: Callable[[], pendulum.Date] = today_local,
        regenerate_on_rollover: bool = False,
    ) -> None:
        self._session = session
        self._store = store
        self._auth = auth
        self._clock = clock
        self._regenerate_on_rollover = regenerate_on_rollover

        self.window: Window = generate_window(clock())
        self.loading = True
        self.error: Optional[StreakError] = None
        self.interaction: InteractionState = interaction.initial_state()
        self.draft = ""

        self._mounted = False
        self._generation = 0
        self._submitting = False
        self._unsubscribe: Optional[Callable[[], None]] = None

    @property
    def owner(self) -> EntityId:
        return self._session["user_id"]

    @property
    def mounted(self) -> bool:
        return self._mounted

    @property
    def submitting(self) -> bool:
        return self._submitting

    def mount(self) -> None:
        if self._auth is not None and self._unsubscribe is None:
            self._unsubscribe = self._auth.subscribe(self.__on_auth_change)
        self._mounted = True
        self.interaction = interaction.initial_state()
        self.window = generate_window(self._clock())
        self.__load()

    def unmount(self) -> None:
        self._mounted = False
        self._generation += 1
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def refresh(self) -> None:
        """Regenerate the window for the current date and reload it."""
        self.window = generate_window(self._clock())
        self.__load()

    def __load(self) -> None:
        self._generation += 1
        generation = self._generation
        self.loading = True
        self.error = None

        error: Optional[StreakError] = None
        try:
            loaded = fetch_window(self._store, self.owner, self.window)
        except FetchFailure as e:
            loaded = e.window
            error = e

        if not self._mounted or generation != self._generation:
            logger.debug("discarding stale load result for %s", self.owner)
            return

        self.window = loaded
        self.error = error
        self.loading = False

    def submit(self, text: str) -> bool:
        """
        Log `text` as a task for today.

        Returns True when the task was persisted. Blank text, and text
        submitted while a previous submit is still in flight, are ignored.
        """
        self.draft = text
        if not text.strip():
            return False
        if self._submitting:
            logger.debug("submit ignored, previous task still being stored")
            return False

        today = self._clock()
        if self._regenerate_on_rollover and not is_current(self.window, today):
            logger.info("date rolled over, regenerating window")
            self.refresh()

        date = date_to_iso_str(today)
        generation = self._generation
        self._submitting = True
        try:
            updated_window = append_task(
                self._store, self.owner, self.window, date, text
            )
        except WriteFailure as e:
            self.error = e
            return False
        except OutOfWindowWrite as e:
            self.error = e
            self.draft = ""
            return True
        finally:
            self._submitting = False

        if not self._mounted or generation != self._generation:
            logger.debug("discarding stale append result for %s", self.owner)
            return True

        self.window = updated_window
        self.draft = ""
        # A failed initial load must stay visible, the counts are incomplete
        if not isinstance(self.error, FetchFailure):
            self.error = None
        self.interaction = interaction.task_appended(
            self.interaction, date, text.strip()
        )
        return True

    def hover_enter(self, date: str) -> bool:
        day = find_day(self.window, date)
        if day is None:
            return False
        self.interaction = interaction.hover_enter(self.interaction, day)
        return True

    def hover_leave(self) -> None:
        self.interaction = interaction.hover_leave(self.interaction)

    def click(self, date: str) -> bool:
        day = find_day(self.window, date)
        if day is None:
            return False
        self.interaction = interaction.click(self.interaction, day)
        return True

    def deselect(self) -> None:
        self.interaction = interaction.deselect(self.interaction)

    def snapshot(self) -> BoardSnapshot:
        return {
            "window": self.window,
            "loading": self.loading,
            "error": self.error,
            "interaction": self.interaction,
            "hovered_day": interaction.hovered_day(self.interaction, self.window),
            "selected_day": interaction.selected_day(self.interaction, self.window),
            "draft": self.draft,
        }

    def __on_auth_change(self, event: AuthEvent, session: Optional[Session]) -> None:
        if event == "SIGNED_OUT":
            self.unmount()
        elif session is not None and session["user_id"] != self.owner:
            self.unmount()
