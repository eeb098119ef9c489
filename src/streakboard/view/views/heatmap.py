# SPDX-License-Identifier: MIT

from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.padding import Padding
from rich.style import Style
from rich.text import Text

from streakboard.errors import FetchFailure, OutOfWindowWrite
from streakboard.model.board import BoardSnapshot
from streakboard.model.day import Day, Window
from streakboard.service.heatmap import intensity
from streakboard.service.window import DAYS_PER_WEEK, window_range, window_weeks
from streakboard.view.views.day import build_day_detail, build_tooltip
from streakboard.view.views.header import header

CELL_SYMBOL = "■"
SELECTED_SYMBOL = "▣"
HOVERED_SYMBOL = "□"


def cell_style(day: Day) -> Style:
    # "rgb(0, 40, 0)" is a valid color but not a valid style string
    return Style(color=intensity(day))


def build_heatmap_grid(
    window: Window,
    hovered_date: Optional[str] = None,
    selected_date: Optional[str] = None,
) -> Text:
    """
    Build the contribution grid.

    Each column holds seven consecutive days, oldest column first, so the
    grid reads top to bottom and then left to right in date order.
    """
    weeks = window_weeks(window)
    grid = Text()

    for row in range(DAYS_PER_WEEK):
        for week in weeks:
            if row >= len(week):
                grid.append("  ")
                continue
            day = week[row]
            symbol = CELL_SYMBOL
            if day["date"] == selected_date:
                symbol = SELECTED_SYMBOL
            elif day["date"] == hovered_date:
                symbol = HOVERED_SYMBOL
            grid.append(symbol, style=cell_style(day))
            grid.append(" ")
        if row < DAYS_PER_WEEK - 1:
            grid.append("\n")

    return grid


def heatmap_view(user_email: str, snapshot: BoardSnapshot) -> None:
    """Display the heatmap with tooltip, detail panel and any error."""
    header(user_email, "streak")

    console = Console()

    if snapshot["loading"]:
        console.print(Padding("Loading your streak data...", (1, 1)))
        return

    window = snapshot["window"]
    interaction = snapshot["interaction"]
    first_date, last_date = window_range(window)
    active_days = sum(1 for day in window if len(day["tasks"]) > 0)
    total_tasks = sum(len(day["tasks"]) for day in window)

    console.print()
    console.print(
        Padding(
            build_heatmap_grid(
                window, interaction["hovered_date"], interaction["selected_date"]
            ),
            (0, 1),
        )
    )
    console.print(
        Padding(
            f"[bright_black]{first_date} → {last_date}  "
            f"{total_tasks} task(s) on {active_days} day(s)[/bright_black]",
            (1, 1, 0, 1),
        )
    )

    error = snapshot["error"]
    if error is not None:
        style = "yellow" if isinstance(error, OutOfWindowWrite) else "red"
        console.print(
            Padding(f"[{style}]{escape(str(error))}[/{style}]", (1, 1, 0, 1))
        )
        if isinstance(error, FetchFailure):
            console.print(
                Padding("[red]Showing an empty year until tasks load.[/red]", (0, 1))
            )

    hovered_day = snapshot["hovered_day"]
    if hovered_day is not None:
        console.print(Padding(build_tooltip(hovered_day), (1, 1, 0, 1)))

    selected_day = snapshot["selected_day"]
    if selected_day is not None:
        console.print()
        console.print(Padding(build_day_detail(selected_day), (0, 1)))
