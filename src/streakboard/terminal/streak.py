# SPDX-License-Identifier: MIT

from typing import Annotated, Optional, cast

import typer
from rich.console import Console
from rich.markup import escape

from streakboard.errors import FetchFailure, OutOfWindowWrite, WriteFailure
from streakboard.service.heatmap import task_count
from streakboard.terminal.parse import parse_date
from streakboard.terminal.session import load_auth, mount_board, require_session
from streakboard.time import date_to_iso_str, today_local
from streakboard.view.views.day import build_tooltip, day_view
from streakboard.view.views.heatmap import heatmap_view


def add(
    text: Annotated[
        list[str],
        typer.Argument(help="What did you do today?"),
    ],
) -> None:
    """Log a task for today."""
    auth = load_auth()
    board = mount_board(auth)
    console = Console()

    if isinstance(board.error, FetchFailure):
        console.print(f"[red]{escape(str(board.error))}[/red]")

    stored = board.submit(" ".join(text))
    error = board.error
    board.unmount()

    if isinstance(error, WriteFailure):
        console.print(f"[red]{escape(str(error))}[/red]")
        raise typer.Exit(1)
    if isinstance(error, OutOfWindowWrite):
        console.print(f"[yellow]{escape(str(error))}[/yellow]")
        return
    if not stored:
        typer.echo("Nothing to log.")
        return

    # Counts are incomplete when the initial load failed
    if isinstance(error, FetchFailure):
        console.print("Logged task for today")
        return

    today = date_to_iso_str(today_local())
    for day in board.window:
        if day["date"] == today:
            console.print(f"Logged task #{task_count(day)} for today")
            console.print(build_tooltip(day))


def show(
    select: Annotated[
        Optional[str],
        typer.Option(
            "--select",
            "-s",
            help="Show the tasks of this date (YYYY-MM-DD, -N, today, yesterday)",
        ),
    ] = None,
    hover: Annotated[
        Optional[str],
        typer.Option(
            "--hover",
            "-hv",
            help="Show the tooltip of this date",
        ),
    ] = None,
) -> None:
    """Show the contribution heatmap for the last year."""
    auth = load_auth()
    session = require_session(auth)
    board = mount_board(auth)
    console = Console()

    selected_date = parse_date(select)
    if selected_date is not None and not board.click(selected_date):
        console.print(
            f"[yellow]{selected_date} is not within the displayed year.[/yellow]"
        )

    hovered_date = parse_date(hover)
    if hovered_date is not None and not board.hover_enter(hovered_date):
        console.print(
            f"[yellow]{hovered_date} is not within the displayed year.[/yellow]"
        )

    heatmap_view(session["email"], board.snapshot())
    board.unmount()


def day(
    date: Annotated[
        str,
        typer.Argument(help="YYYY-MM-DD, -N, today or yesterday"),
    ] = "today",
) -> None:
    """Show the tasks logged on one day."""
    auth = load_auth()
    board = mount_board(auth)

    parsed_date = cast(str, parse_date(date))
    if isinstance(board.error, FetchFailure):
        Console().print(f"[red]{escape(str(board.error))}[/red]")

    board.click(parsed_date)
    day_view(board.snapshot()["selected_day"], parsed_date)
    board.unmount()
