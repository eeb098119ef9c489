# SPDX-License-Identifier: MIT

import logging
from typing import Iterable, Optional, Protocol

from streakboard.errors import FetchFailure, OutOfWindowWrite, StoreError, WriteFailure
from streakboard.model.day import Window
from streakboard.model.entity_id import EntityId
from streakboard.model.task_record import TaskRecord
from streakboard.service.window import find_day_index

logger = logging.getLogger(__name__)


class TaskStore(Protocol):
    """Persistence collaborator for task records. Failures raise StoreError."""

    def fetch_tasks(self, owner: EntityId) -> list[TaskRecord]: ...

    def insert_task(self, owner: EntityId, date: str, text: str) -> TaskRecord: ...


def aggregate(
    window: Window,
    records: Iterable[TaskRecord],
    owner: Optional[EntityId] = None,
) -> Window:
    """
    Merge task records into a window, keyed by date.

    Each Day's task list becomes the texts of the records with its date, in
    the order the records were given. Records dated outside the window, and
    records of another owner when `owner` is given, are dropped.

    The input window is not modified; a new window with new Days is returned.
    """
    tasks_by_date: dict[str, list[str]] = {}
    for record in records:
        if owner is not None and record["owner"] != owner:
            continue
        tasks_by_date.setdefault(record["date"], []).append(record["text"])

    return [
        {"date": day["date"], "tasks": list(tasks_by_date.get(day["date"], []))}
        for day in window
    ]


def fetch_window(store: TaskStore, owner: EntityId, window: Window) -> Window:
    """
    Fetch the owner's records and aggregate them into `window`.

    Raises:
        FetchFailure: The store could not deliver the records. The failure
            carries the original, unmodified window.
    """
    try:
        records = store.fetch_tasks(owner)
    except StoreError as e:
        logger.error("fetching tasks for %s failed: %s", owner, e)
        raise FetchFailure(window, str(e)) from e

    aggregated = aggregate(window, records, owner)
    logger.debug("aggregated %d record(s) for %s", len(records), owner)
    return aggregated


def append_task(
    store: TaskStore,
    owner: EntityId,
    window: Window,
    date: str,
    text: str,
) -> Window:
    """
    Persist a task and derive the updated window.

    Blank text (after trimming) is ignored: the same window object is
    returned and nothing is written. Otherwise the trimmed text is written
    first, and only then is the Day for `date` replaced by a copy with the
    text appended. All other Days keep their identity.

    Raises:
        WriteFailure: The store rejected the write; nothing changed.
        OutOfWindowWrite: The write succeeded but `date` is not in the window,
            so the window could not be updated.
    """
    text = text.strip()
    if not text:
        return window

    try:
        store.insert_task(owner, date, text)
    except StoreError as e:
        logger.error("storing task for %s on %s failed: %s", owner, date, e)
        raise WriteFailure(date, text, str(e)) from e

    index = find_day_index(window, date)
    if index is None:
        logger.warning("stored task for %s falls outside the current window", date)
        raise OutOfWindowWrite(date, text)

    day = window[index]
    updated_window = list(window)
    updated_window[index] = {"date": day["date"], "tasks": [*day["tasks"], text]}
    return updated_window
