# SPDX-License-Identifier: MIT

from typing import TypeAlias, TypedDict


class Day(TypedDict):
    date: str  # local calendar date, "YYYY-MM-DD"
    tasks: list[str]  # task texts in insertion order, never mutated in place


# 365 contiguous Days, oldest first, ending at the generation date
Window: TypeAlias = list[Day]
