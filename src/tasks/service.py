import logging

from src.tasks.schemas import CreateTaskRequest, Task, TaskStats, UpdateTaskRequest
from src.tasks.store.base import TaskStore
from src.tasks.views import summarize_tasks

logger = logging.getLogger(__name__)


class TaskService:
    def __init__(self, *, task_store: TaskStore) -> None:
        self.task_store = task_store

    def list_tasks(self) -> list[Task]:
        return self.task_store.list_tasks()

    def create_task(self, task_input: CreateTaskRequest) -> Task:
        task = self.task_store.create_task(
            text=task_input.text,
            completed=task_input.completed,
        )
        logger.info(f"Created task '{task.id}'")
        return task

    def update_task(self, task_id: str, task_input: UpdateTaskRequest) -> Task:
        task = self.task_store.update_task(
            task_id,
            text=task_input.text,
            completed=task_input.completed,
        )
        logger.info(f"Updated task '{task_id}'")
        return task

    def delete_task(self, task_id: str) -> None:
        self.task_store.delete_task(task_id)
        logger.info(f"Deleted task '{task_id}'")

    def get_stats(self) -> TaskStats:
        return summarize_tasks(self.task_store.list_tasks())
