# SPDX-License-Identifier: MIT

from typing import Literal, TypedDict

import pendulum

from streakboard.model.entity_id import EntityId

AuthEvent = Literal["SIGNED_IN", "SIGNED_OUT"]


class Session(TypedDict):
    user_id: EntityId
    email: str
    signed_in: pendulum.DateTime
