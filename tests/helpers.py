# tests/helpers.py

from typing import List

from taskz.schema import Task


def make_tasks(*descriptions: str) -> List[Task]:
    """Tasks with ids 1..n in the given order"""
    return [Task(id=i, description=d) for i, d in enumerate(descriptions, start=1)]
