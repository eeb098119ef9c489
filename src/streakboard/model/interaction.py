# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict


class InteractionState(TypedDict):
    # Both axes hold a date key into the Window rather than a copy of the Day
    hovered_date: Optional[str]
    selected_date: Optional[str]
