"""Shapes of records returned by the Snaptask backend.

These are only used for type hints; backend results are passed through
without validation.
"""
from typing import List, Optional, TypedDict


class _TaskBase(TypedDict):
    id: str
    title: str
    isCompleted: bool
    dueDate: Optional[str]


class TaskRecord(_TaskBase, total=False):
    hasIncompleteSubtasks: bool


class CreateTasksResult(TypedDict):
    response: str
    sources: list
    tasks: List[TaskRecord]


class UpdateTaskStatusResult(TypedDict):
    updatedCount: int


class Suggestion(TypedDict):
    title: str
    action: Optional[str]
    day: Optional[str]
    startTime: Optional[str]
    durationMin: Optional[int]
    taskId: Optional[str]
