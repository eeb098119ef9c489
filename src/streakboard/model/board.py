# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

from streakboard.errors import StreakError
from streakboard.model.day import Day, Window
from streakboard.model.interaction import InteractionState


class BoardSnapshot(TypedDict):
    window: Window
    loading: bool
    error: Optional[StreakError]
    interaction: InteractionState
    hovered_day: Optional[Day]
    selected_day: Optional[Day]
    draft: str
