# SPDX-License-Identifier: MIT

from typing import cast

import pendulum


def now_utc() -> pendulum.DateTime:
    return pendulum.now("UTC")


def today_local() -> pendulum.Date:
    """The current local calendar date."""
    return pendulum.today("local").date()


def datetime_to_iso_str(datetime: pendulum.DateTime) -> str:
    return datetime.isoformat()


def datetime_from_str(datetime: str) -> pendulum.DateTime:
    return cast(pendulum.DateTime, pendulum.parse(datetime))


def datetime_to_display_local_datetime_str(datetime: pendulum.DateTime) -> str:
    return datetime.in_tz("local").format("MMM-DD ddd HH:mm")


def date_to_iso_str(date: pendulum.Date) -> str:
    """Convert a pendulum.Date to a 'YYYY-MM-DD' string."""
    return date.to_date_string()


def date_from_iso_str(date_str: str) -> pendulum.Date:
    """Parse a 'YYYY-MM-DD' string into a pendulum.Date."""
    return cast(pendulum.Date, pendulum.parse(date_str, exact=True))


def date_to_display_str(date_str: str) -> str:
    """Format a 'YYYY-MM-DD' string for display, e.g. '2024-03-05 Tue'."""
    return date_from_iso_str(date_str).format("YYYY-MM-DD ddd")
