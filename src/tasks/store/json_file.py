import logging
import os
import threading
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from src.common.current_datetime import get_current_datetime
from src.common.exceptions import (
    ResourceNotFoundException,
    ResourceType,
    StorageException,
)
from src.tasks.schemas import Task
from src.tasks.store.base import TaskStore

logger = logging.getLogger(__name__)

task_list_adapter = TypeAdapter(list[Task])


class JsonFileTaskStore(TaskStore):
    """Task collection held in memory and mirrored to a JSON file.

    Every mutation rewrites the whole file before returning. Identifiers come
    from a counter seeded with the highest numeric id found at load time, so
    they are never reused while the file survives.
    """

    def __init__(self, *, path: str | Path):
        self.path = Path(path)
        self._tasks: list[Task] = []
        self._next_id = 1
        self._lock = threading.Lock()

    def load(self) -> None:
        with self._lock:
            tasks: list[Task] | None
            try:
                tasks = task_list_adapter.validate_json(self.path.read_bytes())
            except FileNotFoundError:
                tasks = None
            except (OSError, ValidationError) as e:
                logger.warning(f"Unreadable tasks file {self.path}, starting empty: {e}")
                tasks = None

            if tasks is None:
                self._tasks = []
                self._save()
                logger.info(f"Created new tasks file at {self.path}")
            else:
                self._tasks = tasks
                logger.info(f"Loaded {len(tasks)} tasks from {self.path}")

            self._next_id = self._seed_next_id()

    def list_tasks(self) -> list[Task]:
        with self._lock:
            return [task.model_copy() for task in self._tasks]

    def create_task(self, text: str, completed: bool = False) -> Task:
        with self._lock:
            task = Task(
                id=str(self._next_id),
                text=text,
                completed=completed,
                created_at=get_current_datetime(),
            )
            self._next_id += 1
            self._tasks.append(task)
            self._save()
            return task.model_copy()

    def update_task(
        self,
        task_id: str,
        text: str | None = None,
        completed: bool | None = None,
    ) -> Task:
        with self._lock:
            index = self._find_index(task_id)

            updates: dict[str, str | bool] = {}
            if text is not None:
                updates["text"] = text
            if completed is not None:
                updates["completed"] = completed

            self._tasks[index] = self._tasks[index].model_copy(update=updates)
            self._save()
            return self._tasks[index].model_copy()

    def delete_task(self, task_id: str) -> None:
        with self._lock:
            index = self._find_index(task_id)
            del self._tasks[index]
            self._save()

    def check(self) -> None:
        if not self.path.is_file():
            raise StorageException(str(self.path), "Tasks file is missing")

        if not os.access(self.path, os.R_OK) or not os.access(
            self.path.parent, os.W_OK
        ):
            raise StorageException(str(self.path), "Tasks file is not accessible")

    def _find_index(self, task_id: str) -> int:
        for index, task in enumerate(self._tasks):
            if task.id == task_id:
                return index
        raise ResourceNotFoundException(ResourceType.TASK, task_id)

    def _seed_next_id(self) -> int:
        numeric_ids: list[int] = []
        for task in self._tasks:
            if not task.id.isdecimal():
                continue
            try:
                numeric_ids.append(int(task.id))
            except ValueError:
                # Too many digits for int(); such an id cannot collide with the counter
                logger.warning(f"Ignoring task id of length {len(task.id)} for id seeding")
        return max(numeric_ids) + 1 if numeric_ids else 1

    def _save(self) -> None:
        data = task_list_adapter.dump_json(self._tasks, by_alias=True, indent=2)
        tmp_path = self.path.with_name(f"{self.path.name}.tmp")

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp_path, "wb") as f:
                f.write(data)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_path, self.path)
        except OSError as e:
            tmp_path.unlink(missing_ok=True)
            raise StorageException(str(self.path), "Failed to write tasks file") from e
