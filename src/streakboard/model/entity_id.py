# SPDX-License-Identifier: MIT

import uuid
from typing import TypeAlias

EntityId: TypeAlias = str

UNSET_ENTITY_ID: EntityId = "00000000-0000-0000-0000-000000000000"

_USER_NAMESPACE = uuid.UUID("5d2a4c1e-7b59-4f3a-9a0e-3c6f1d8b2e47")


def generate_entity_id() -> EntityId:
    return str(uuid.uuid4())


def user_id_for_email(email: str) -> EntityId:
    """Stable user id so the same email always owns the same records."""
    return str(uuid.uuid5(_USER_NAMESPACE, email.strip().lower()))
