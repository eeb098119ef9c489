# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

from streakboard.model.entity_id import EntityId


class TaskRecord(TypedDict):
    id: Optional[EntityId]
    owner: EntityId  # user id of the session that logged the task
    date: str  # local calendar date, "YYYY-MM-DD"
    text: str
    created: pendulum.DateTime
