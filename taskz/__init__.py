"""
TASKZ - Minimalistic Todo List
==============================

Personal task list for the command line. Tasks are named loosely when
finishing or editing them: the closest description by edit distance
wins, as long as it is similar enough.

Usage:
    from taskz import TaskManager

    manager = TaskManager("~/.local/share/taskz")
    manager.load()
    manager.add_task("pet my hamster")

    # Typos and partial phrases are fine
    manager.complete_task("petting hamster")
    manager.undo()
"""

from .schema import (
    Task,
    TaskList,
    Resolution
)

from .matching import (
    DEFAULT_THRESHOLD,
    levenshtein_distance,
    normalize,
    resolve,
    similarity
)

from .manager import TaskManager, TaskStoreError
from .installer import Installer

__version__ = "1.0.0"
__all__ = [
    "TaskManager",
    "TaskStoreError",
    "Installer",
    "Task",
    "TaskList",
    "Resolution",
    "DEFAULT_THRESHOLD",
    "levenshtein_distance",
    "normalize",
    "resolve",
    "similarity"
]
