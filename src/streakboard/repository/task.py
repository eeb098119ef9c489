# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from pathlib import Path
from typing import Any, Optional, cast

from yaml import YAMLError, dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from streakboard import configuration, time
from streakboard.errors import StoreError
from streakboard.model.entity_id import EntityId, generate_entity_id
from streakboard.model.task_record import TaskRecord
from streakboard.template.task_record import get_task_record_template

logger = logging.getLogger(__name__)


class TaskRepository:
    """
    Task store backed by a single YAML file.

    Records are kept in insertion order. Every fetch re-reads the file and
    every insert writes it back immediately, so a returned record is
    persisted.
    """

    def __init__(self, path: Optional[Path] = None) -> None:
        self._path = path
        self._tasks: Optional[list[TaskRecord]] = None

    @property
    def path(self) -> Path:
        if self._path is not None:
            return self._path
        return configuration.DATA_TASKS_PATH

    @property
    def tasks(self) -> list[TaskRecord]:
        if self._tasks is None:
            self.__load_data()
        if self._tasks is None:
            raise ValueError()
        return self._tasks

    def __load_data(self) -> None:
        try:
            raw_data = load(self.path.read_text(), Loader=Loader)
        except FileNotFoundError:
            raw_data = None
        except (OSError, YAMLError) as e:
            raise StoreError(f"cannot read {self.path}: {e}") from e

        if raw_data is None:
            self._tasks = []
            return

        if not isinstance(raw_data, dict) or not isinstance(
            raw_data.get("tasks"), list
        ):
            raise StoreError(f"{self.path} does not contain a task list")

        self._tasks = [
            self.__convert_task_for_deserialization(raw_task)
            for raw_task in raw_data["tasks"]
        ]

    def __save_data(self, tasks: list[TaskRecord]) -> None:
        serializable_tasks = [
            self.__convert_task_for_serialization(deepcopy(task)) for task in tasks
        ]
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(dump({"tasks": serializable_tasks}, Dumper=Dumper))
        except OSError as e:
            raise StoreError(f"cannot write {self.path}: {e}") from e

    def __convert_task_for_serialization(self, task: TaskRecord) -> dict[str, Any]:
        serializable_task = cast(dict[str, Any], task)
        serializable_task["created"] = time.datetime_to_iso_str(
            serializable_task["created"]
        )
        return serializable_task

    def __convert_task_for_deserialization(self, task: Any) -> TaskRecord:
        if not isinstance(task, dict):
            raise StoreError(f"malformed task record in {self.path}: {task!r}")
        try:
            return {
                "id": task.get("id"),
                "owner": str(task["owner"]),
                "date": str(task["date"]),
                "text": str(task["text"]),
                "created": time.datetime_from_str(task["created"]),
            }
        except (KeyError, TypeError, ValueError) as e:
            raise StoreError(f"malformed task record in {self.path}: {e}") from e

    def fetch_tasks(self, owner: EntityId) -> list[TaskRecord]:
        self._tasks = None
        tasks = [task for task in self.tasks if task["owner"] == owner]
        logger.debug("fetched %d task(s) for %s", len(tasks), owner)
        return deepcopy(tasks)

    def insert_task(self, owner: EntityId, date: str, text: str) -> TaskRecord:
        # Re-read so records written elsewhere since the last fetch survive
        self._tasks = None
        tasks = self.tasks

        task = get_task_record_template()
        task["id"] = generate_entity_id()
        task["owner"] = owner
        task["date"] = date
        task["text"] = text

        tasks.append(task)
        try:
            self.__save_data(tasks)
        except StoreError:
            tasks.remove(task)
            raise

        logger.info("stored task %s for %s on %s", task["id"], owner, date)
        return deepcopy(task)


TASK_REPO = TaskRepository()
