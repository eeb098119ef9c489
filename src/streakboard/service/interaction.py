# SPDX-License-Identifier: MIT

from typing import Optional

from streakboard.model.day import Day, Window
from streakboard.model.interaction import InteractionState
from streakboard.service.window import find_day

# Hover and selection are independent: no transition touches the other axis.


def initial_state() -> InteractionState:
    return {"hovered_date": None, "selected_date": None}


def hover_enter(state: InteractionState, day: Day) -> InteractionState:
    return {**state, "hovered_date": day["date"]}


def hover_leave(state: InteractionState) -> InteractionState:
    return {**state, "hovered_date": None}


def click(state: InteractionState, day: Day) -> InteractionState:
    return {**state, "selected_date": day["date"]}


def deselect(state: InteractionState) -> InteractionState:
    return {**state, "selected_date": None}


def task_appended(state: InteractionState, date: str, text: str) -> InteractionState:
    """
    React to a task being appended for `date`.

    Selection is held as a date key, so the selected Day is re-read from the
    window on every projection and already includes the new task.
    """
    return state


def hovered_day(state: InteractionState, window: Window) -> Optional[Day]:
    return find_day(window, state["hovered_date"])


def selected_day(state: InteractionState, window: Window) -> Optional[Day]:
    return find_day(window, state["selected_date"])
