"""
TASKZ - Task Schema Definition
==============================
Data models for the personal task list and for fuzzy task resolution.
"""

from datetime import datetime, timezone
from typing import Optional, List

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Task(BaseModel):
    """Single task on the list"""
    # Creation timestamp (seconds). Older files call it "created_at".
    id: int = Field(validation_alias=AliasChoices("id", "created_at"))
    description: str


class TaskList(BaseModel):
    """The whole task list, in insertion order"""
    tasks: List[Task] = Field(default_factory=list)
    updated_at: datetime = Field(default_factory=_utcnow)

    @model_validator(mode="after")
    def _unique_ids(self) -> "TaskList":
        """Older files can hold tasks created in the same second; renumber repeats past the highest id"""
        seen = set()
        next_id = max((t.id for t in self.tasks), default=0) + 1
        for task in self.tasks:
            if task.id in seen:
                task.id = next_id
                next_id += 1
            seen.add(task.id)
        return self

    def get(self, task_id: int) -> Optional[Task]:
        for task in self.tasks:
            if task.id == task_id:
                return task
        return None

    def ids(self) -> List[int]:
        return [task.id for task in self.tasks]

    def ordered(self, alphabetical: bool = False) -> List[Task]:
        """Sorted view of the tasks; stored order is left alone"""
        if alphabetical:
            return sorted(self.tasks, key=lambda t: t.description.lower())
        return sorted(self.tasks, key=lambda t: t.id)


class Resolution(BaseModel):
    """
    Outcome of matching a free-text query against the task list.

    `task_id` is None when nothing was similar enough (NoMatch); `score`
    is then the best similarity seen, for diagnostics.
    """
    model_config = ConfigDict(frozen=True)

    task_id: Optional[int] = None
    score: float = Field(ge=0.0, le=1.0, default=0.0)

    @property
    def matched(self) -> bool:
        return self.task_id is not None

    @classmethod
    def no_match(cls, score: float = 0.0) -> "Resolution":
        return cls(task_id=None, score=score)
