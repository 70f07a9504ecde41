from abc import ABC, abstractmethod

from src.tasks.schemas import Task


class TaskStore(ABC):
    @abstractmethod
    def load(self) -> None:
        pass

    @abstractmethod
    def list_tasks(self) -> list[Task]:
        pass

    @abstractmethod
    def create_task(self, text: str, completed: bool = False) -> Task:
        pass

    @abstractmethod
    def update_task(
        self,
        task_id: str,
        text: str | None = None,
        completed: bool | None = None,
    ) -> Task:
        pass

    @abstractmethod
    def delete_task(self, task_id: str) -> None:
        pass

    @abstractmethod
    def check(self) -> None:
        pass
