# SPDX-License-Identifier: MIT

import re
from typing import Optional

import pendulum
import typer

from streakboard.time import date_from_iso_str, date_to_iso_str, today_local


def parse_date(
    date_param: Optional[str], today: Optional[pendulum.Date] = None
) -> Optional[str]:
    """
    Parse a command line date into a 'YYYY-MM-DD' string.

    Accepts YYYY-MM-DD, a relative day offset ("-1", "0"), "today"/"t" and
    "yesterday"/"y".
    """
    if date_param is None:
        return None

    date = date_param.strip()
    if today is None:
        today = today_local()

    if re.match(r"^\d{4}-\d{2}-\d{2}$", date):
        try:
            return date_to_iso_str(date_from_iso_str(date))
        except ValueError as e:
            raise typer.BadParameter(f"Invalid date: {e}")

    # Match numeric input for relative days (e.g., "0", "-1", "-30")
    if re.match(r"^-?\d+$", date):
        return date_to_iso_str(today.add(days=int(date)))

    if date == "today" or date == "t":
        return date_to_iso_str(today)
    if date == "yesterday" or date == "y":
        return date_to_iso_str(today.subtract(days=1))
    raise typer.BadParameter("Incorrect date format, expected YYYY-MM-DD")
