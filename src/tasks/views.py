import math
from enum import Enum
from typing import Iterable

from src.tasks.schemas import Task, TaskStats


class TaskView(str, Enum):
    ALL = "all"
    PENDING = "pending"
    COMPLETED = "completed"


def filter_tasks(tasks: Iterable[Task], view: TaskView) -> list[Task]:
    if view == TaskView.COMPLETED:
        return [task for task in tasks if task.completed]
    if view == TaskView.PENDING:
        return [task for task in tasks if not task.completed]
    return list(tasks)


def completion_progress(completed_count: int, total_count: int) -> int:
    """Percentage of completed tasks, rounded half up; 0 for an empty list."""
    if total_count <= 0:
        return 0
    return math.floor(100 * completed_count / total_count + 0.5)


def summarize_tasks(tasks: list[Task]) -> TaskStats:
    completed_count = len(filter_tasks(tasks, TaskView.COMPLETED))
    return TaskStats(
        total=len(filter_tasks(tasks, TaskView.ALL)),
        completed=completed_count,
        pending=len(filter_tasks(tasks, TaskView.PENDING)),
        progress=completion_progress(completed_count, len(tasks)),
    )
