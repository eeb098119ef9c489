# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum

from streakboard.model.day import Day, Window
from streakboard.time import date_to_iso_str

WINDOW_DAYS = 365
DAYS_PER_WEEK = 7


def generate_window(today: pendulum.Date) -> Window:
    """
    Build the empty calendar window ending at `today`.

    Args:
        today: The local date the window is generated on

    Returns:
        WINDOW_DAYS Days in ascending date order, the last one being `today`,
        each with a fresh empty task list
    """
    return [
        {"date": date_to_iso_str(today.subtract(days=offset)), "tasks": []}
        for offset in range(WINDOW_DAYS - 1, -1, -1)
    ]


def window_range(window: Window) -> tuple[str, str]:
    """First and last date of the window, as ISO strings."""
    return window[0]["date"], window[-1]["date"]


def is_current(window: Window, today: pendulum.Date) -> bool:
    """Whether the window still ends at `today`."""
    return len(window) > 0 and window[-1]["date"] == date_to_iso_str(today)


def find_day_index(window: Window, date: str) -> Optional[int]:
    for index, day in enumerate(window):
        if day["date"] == date:
            return index
    return None


def find_day(window: Window, date: Optional[str]) -> Optional[Day]:
    if date is None:
        return None
    index = find_day_index(window, date)
    if index is None:
        return None
    return window[index]


def window_weeks(window: Window) -> list[list[Day]]:
    """Split the window into columns of seven Days, oldest first."""
    return [
        window[start : start + DAYS_PER_WEEK]
        for start in range(0, len(window), DAYS_PER_WEEK)
    ]
