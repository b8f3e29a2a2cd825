"""Task service: ownership-scoped task storage.

Every query filters on the owner's id. A task owned by someone else is
reported exactly like a task that does not exist.
"""
from datetime import datetime
from typing import List

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from task_manager.errors import NotFoundError, StoreError
from task_manager.models.task import Task
from task_manager.utils.logger import get_logger

logger = get_logger("task_manager.tasks")

LIKE_ESCAPE = "\\"


def escape_like(value: str, escape: str = LIKE_ESCAPE) -> str:
    """Escape LIKE wildcards so ``value`` matches literally."""
    return (
        value.replace(escape, escape + escape)
        .replace("%", escape + "%")
        .replace("_", escape + "_")
    )


class TaskService:
    """Service class for task CRUD and search, scoped to one owner per call."""

    def __init__(self, session: Session):
        self.session = session

    def _commit(self, action: str, **context):
        try:
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.error(f"Failed to {action}", error=str(e), **context)
            raise StoreError() from e

    def _all(self, statement, action: str, **context) -> List[Task]:
        try:
            return list(self.session.exec(statement).all())
        except SQLAlchemyError as e:
            logger.error(f"Failed to {action}", error=str(e), **context)
            raise StoreError() from e

    def create(self, user_id: str, title: str, description: str, due_date: datetime) -> Task:
        """Create a new, not-done task owned by ``user_id``."""
        task = Task(
            user_id=user_id,
            title=title,
            description=description,
            due_date=due_date,
            status=False,
        )
        self.session.add(task)
        self._commit("create task", user_id=user_id)
        self.session.refresh(task)
        logger.debug("Task created", task_id=task.id, user_id=user_id)
        return task

    def list(self, user_id: str) -> List[Task]:
        """Get all tasks owned by ``user_id`` in creation order."""
        statement = (
            select(Task)
            .where(Task.user_id == user_id)
            .order_by(Task.created_at.asc())
        )
        return self._all(statement, "list tasks", user_id=user_id)

    def get(self, user_id: str, task_id: str) -> Task:
        """
        Get a specific task by ID, ensuring user ownership.

        Raises:
            NotFoundError: If no task with this id belongs to ``user_id``
        """
        statement = (
            select(Task)
            .where(Task.id == task_id)
            .where(Task.user_id == user_id)
        )
        try:
            task = self.session.exec(statement).first()
        except SQLAlchemyError as e:
            logger.error("Failed to get task", task_id=task_id, user_id=user_id, error=str(e))
            raise StoreError() from e

        if task is None:
            raise NotFoundError()
        return task

    def update(
        self,
        user_id: str,
        task_id: str,
        title: str,
        description: str,
        due_date: datetime,
        status: bool,
    ) -> Task:
        """
        Replace all mutable fields of an owned task.

        Raises:
            NotFoundError: If no task with this id belongs to ``user_id``
        """
        task = self.get(user_id, task_id)
        task.title = title
        task.description = description
        task.due_date = due_date
        task.status = status

        self.session.add(task)
        self._commit("update task", task_id=task_id, user_id=user_id)
        self.session.refresh(task)
        return task

    def delete(self, user_id: str, task_id: str) -> None:
        """
        Delete an owned task.

        Raises:
            NotFoundError: If no task with this id belongs to ``user_id``
        """
        task = self.get(user_id, task_id)
        self.session.delete(task)
        self._commit("delete task", task_id=task_id, user_id=user_id)

    def search_by_title(self, user_id: str, query: str) -> List[Task]:
        """Case-insensitive substring search on the titles of owned tasks."""
        pattern = f"%{escape_like(query)}%"
        statement = (
            select(Task)
            .where(Task.user_id == user_id)
            .where(Task.title.ilike(pattern, escape=LIKE_ESCAPE))
            .order_by(Task.created_at.asc())
        )
        return self._all(statement, "search tasks", user_id=user_id)
