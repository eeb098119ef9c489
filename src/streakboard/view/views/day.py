# SPDX-License-Identifier: MIT

from typing import Optional

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.style import Style
from rich.table import Table
from rich.text import Text

from streakboard.model.day import Day
from streakboard.service.heatmap import intensity, task_count
from streakboard.time import date_to_display_str


def build_tooltip(day: Day) -> Text:
    """The hover tooltip: date and task count."""
    tooltip = Text()
    tooltip.append("■ ", style=Style(color=intensity(day)))
    tooltip.append(date_to_display_str(day["date"]), style="bold")
    tooltip.append(f"  Tasks: {task_count(day)}")
    return tooltip


def build_day_detail(day: Day) -> Panel:
    """The detail panel listing every task of a selected day."""
    if task_count(day) > 0:
        tasks_table = Table(box=box.SIMPLE, show_header=False)
        tasks_table.add_column("#", style="bright_black", justify="right")
        tasks_table.add_column("task")
        for index, task in enumerate(day["tasks"], start=1):
            tasks_table.add_row(str(index), Text(task))
        body: Table | Text = tasks_table
    else:
        body = Text("No tasks recorded.", style="bright_black")

    return Panel(
        body,
        title=f"Tasks completed on {day['date']}",
        title_align="left",
        border_style="grey50",
    )


def day_view(day: Optional[Day], date: str) -> None:
    console = Console()
    if day is None:
        console.print(f"[yellow]{date} is not within the displayed year.[/yellow]")
        return
    console.print(build_day_detail(day))
