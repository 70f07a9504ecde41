from fastapi import Request

from src.tasks.store.base import TaskStore
from src.tasks.store.json_file import JsonFileTaskStore


def create_task_store(tasks_file: str) -> TaskStore:
    task_store = JsonFileTaskStore(path=tasks_file)
    task_store.load()
    return task_store


def get_task_store(request: Request) -> TaskStore:
    return request.app.state.task_store
