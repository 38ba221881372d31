"""
TASKZ - Task Manager
====================
The task store: loads and saves the task list, keeps the undo buffer
and applies add/done/edit/undo/clear.

Primary storage: {data_dir}/tasks.json
Undo buffer:     {data_dir}/undo.json (last task marked done)
"""

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, List, Union

from pydantic import ValidationError

from .matching import DEFAULT_THRESHOLD, resolve
from .schema import Resolution, Task, TaskList

logger = logging.getLogger(__name__)

TASKS_FILE = "tasks.json"
UNDO_FILE = "undo.json"


class TaskStoreError(Exception):
    """Task or undo file could not be read"""


class TaskManager:
    """
    Task store handed to every command.

    Call load() once, then use the task operations; each one that
    changes the list saves it straight away.
    """

    def __init__(
        self,
        data_dir: Union[str, Path],
        threshold: float = DEFAULT_THRESHOLD
    ):
        self.data_dir = Path(data_dir)
        self.threshold = threshold
        self._task_list = TaskList()

    @property
    def tasks(self) -> List[Task]:
        return self._task_list.tasks

    @property
    def tasks_file(self) -> Path:
        return self.data_dir / TASKS_FILE

    @property
    def undo_file(self) -> Path:
        return self.data_dir / UNDO_FILE

    # ========================================
    # PERSISTENCE OPERATIONS
    # ========================================

    def load(self) -> TaskList:
        """Load the task list from disk (empty if there is none yet)"""
        if not self.tasks_file.exists():
            logger.debug(f"No task file at {self.tasks_file}, starting empty")
            self._task_list = TaskList()
            return self._task_list

        data = self._read_json(self.tasks_file)
        try:
            # Older files hold a bare list of tasks
            if isinstance(data, list):
                task_list = TaskList(tasks=data)
            else:
                task_list = TaskList(**data)
        except (TypeError, ValidationError) as e:
            raise TaskStoreError(f"invalid task file {self.tasks_file}: {e}") from e

        self._task_list = task_list
        logger.debug(f"📂 Loaded {len(task_list.tasks)} tasks from {self.tasks_file}")
        return task_list

    def save(self) -> None:
        """Write the task list to disk"""
        self._task_list.updated_at = datetime.now(timezone.utc)
        self._write_json(self.tasks_file, self._task_list.model_dump(mode="json"))
        logger.info(f"✅ Saved {len(self.tasks)} tasks to {self.tasks_file}")

    def _read_json(self, path: Path):
        try:
            with open(path, "r", encoding="utf-8") as f:
                return json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise TaskStoreError(f"cannot read {path}: {e}") from e

    def _write_json(self, path: Path, data) -> None:
        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)
            with open(path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
        except OSError as e:
            raise TaskStoreError(f"cannot write {path}: {e}") from e

    # ========================================
    # TASK OPERATIONS
    # ========================================

    def add_task(self, description: str) -> Task:
        """Append a new task"""
        description = description.strip()
        if not description:
            raise ValueError("task description is empty")

        task = Task(id=self._next_id(), description=description)
        self.tasks.append(task)
        self.save()

        logger.info(f"➕ Added task {task.id}: {task.description}")
        return task

    def list_tasks(self, alphabetical: bool = False) -> List[Task]:
        """Tasks by creation time, or case-insensitively by description"""
        return self._task_list.ordered(alphabetical=alphabetical)

    def search_tasks(self, query: str) -> List[Task]:
        """Tasks whose description contains `query`, ignoring case"""
        needle = query.lower()
        return [t for t in self.tasks if needle in t.description.lower()]

    def resolve(self, query: str) -> Resolution:
        """Find the task `query` most likely refers to"""
        return resolve(query, list(self.tasks), threshold=self.threshold)

    def complete_task(self, query: str) -> Optional[Task]:
        """Remove the best match for `query` and remember it for undo"""
        resolution = self.resolve(query)
        if not resolution.matched:
            logger.info(f"No task matches {query!r} (best score {resolution.score:.2f})")
            return None

        task = self._task_list.get(resolution.task_id)
        # Undo buffer first, so a failed write never loses the task
        self._write_json(self.undo_file, task.model_dump(mode="json"))
        self._task_list.tasks = [t for t in self.tasks if t.id != task.id]
        self.save()

        logger.info(f"✅ Completed task {task.id}: {task.description} (score {resolution.score:.2f})")
        return task

    def edit_task(self, query: str, new_description: str) -> Optional[Task]:
        """Replace the description of the best match for `query`"""
        new_description = new_description.strip()
        if not new_description:
            raise ValueError("new task description is empty")

        resolution = self.resolve(query)
        if not resolution.matched:
            logger.info(f"No task matches {query!r} (best score {resolution.score:.2f})")
            return None

        task = self._task_list.get(resolution.task_id)
        old_description = task.description
        task.description = new_description
        self.save()

        logger.info(f"✏️ Edited task {task.id}: {old_description!r} -> {new_description!r}")
        return task

    def undo(self) -> Optional[Task]:
        """Restore the last completed task, if any"""
        if not self.undo_file.exists():
            return None

        data = self._read_json(self.undo_file)
        try:
            task = Task(**data)
        except (TypeError, ValidationError) as e:
            raise TaskStoreError(f"invalid undo file {self.undo_file}: {e}") from e

        existing = self._task_list.get(task.id)
        if existing is not None and existing.description == task.description:
            logger.warning(f"Task {task.id} is already on the list, not restoring it twice")
        else:
            if existing is not None:
                # Id was reused by a task added since; keep ids unique
                task.id = max(self._task_list.ids()) + 1
            self.tasks.append(task)
            self.save()

        self.undo_file.unlink()
        logger.info(f"↩️ Restored task {task.id}: {task.description}")
        return task

    def clear(self) -> int:
        """Remove every task; returns how many were removed"""
        count = len(self.tasks)
        self._task_list.tasks = []
        self.save()

        logger.info(f"🗑️ Cleared {count} tasks")
        return count

    # ========================================
    # HELPER METHODS
    # ========================================

    def _next_id(self) -> int:
        """Creation timestamp, bumped past existing ids so ids stay unique"""
        now = int(datetime.now(timezone.utc).timestamp())
        ids = self._task_list.ids()
        if ids and now <= max(ids):
            return max(ids) + 1
        return now
