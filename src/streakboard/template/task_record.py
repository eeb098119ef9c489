# SPDX-License-Identifier: MIT

from streakboard.model.entity_id import UNSET_ENTITY_ID
from streakboard.model.task_record import TaskRecord
from streakboard.time import now_utc


def get_task_record_template() -> TaskRecord:
    return {
        "id": None,
        "owner": UNSET_ENTITY_ID,  # Must be set
        "date": "",  # Must be set
        "text": "",
        "created": now_utc(),
    }
