# SPDX-License-Identifier: MIT

from typing import Optional

from streakboard.model.day import Day

EMPTY_COLOR = "#111827"
INTENSITY_STEP = 40
INTENSITY_MAX = 255


def intensity_for_count(count: Optional[int]) -> str:
    """
    Map a task count to a heatmap color.

    Zero (or unknown) counts get EMPTY_COLOR. Any other count shades the green
    channel by INTENSITY_STEP per task, saturating at INTENSITY_MAX.
    """
    if count is None or count <= 0:
        return EMPTY_COLOR
    green = min(count * INTENSITY_STEP, INTENSITY_MAX)
    return f"rgb(0, {green}, 0)"


def task_count(day: Day) -> int:
    tasks = day.get("tasks")
    if tasks is None:
        return 0
    return len(tasks)


def intensity(day: Day) -> str:
    return intensity_for_count(task_count(day))
