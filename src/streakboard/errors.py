# SPDX-License-Identifier: MIT

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from streakboard.model.day import Window


class StoreError(Exception):
    """Raised by a task store when records cannot be read or written."""

    pass


class StreakError(Exception):
    """Base class for recoverable failures surfaced to the board."""

    pass


class FetchFailure(StreakError):
    """The initial fetch failed; `window` is the untouched window."""

    def __init__(self, window: "Window", reason: str) -> None:
        super().__init__(f"Could not load tasks: {reason}")
        self.window = window
        self.reason = reason


class WriteFailure(StreakError):
    """The store rejected a task; nothing was persisted."""

    def __init__(self, date: str, text: str, reason: str) -> None:
        super().__init__(f"Could not store task for {date}: {reason}")
        self.date = date
        self.text = text
        self.reason = reason


class OutOfWindowWrite(StreakError):
    """The task was persisted but its date is not in the current window."""

    def __init__(self, date: str, text: str) -> None:
        super().__init__(
            f"Task stored for {date}, which is outside the displayed year. "
            "Refresh to see it."
        )
        self.date = date
        self.text = text
