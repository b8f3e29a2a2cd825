"""Task router: CRUD and title search for the authenticated user's tasks."""
from fastapi import APIRouter, Depends, Query, status
from sqlmodel import Session

from task_manager.db.config import get_session
from task_manager.middleware.auth import CurrentUser, get_current_user
from task_manager.schemas.auth import MessageResponse
from task_manager.schemas.task import (
    TaskCreate,
    TaskEnvelope,
    TaskListResponse,
    TaskResponse,
    TaskUpdate,
)
from task_manager.services.task_service import TaskService

router = APIRouter(prefix="/tasks", tags=["Tasks"])


def get_task_service(session: Session = Depends(get_session)) -> TaskService:
    """Dependency for getting TaskService instance."""
    return TaskService(session)


def _envelope(task) -> TaskEnvelope:
    return TaskEnvelope(task=TaskResponse.model_validate(task))


def _listing(tasks) -> TaskListResponse:
    return TaskListResponse(tasks=[TaskResponse.model_validate(t) for t in tasks])


@router.post("", response_model=TaskEnvelope, status_code=status.HTTP_201_CREATED)
def create_task(
    task_data: TaskCreate,
    current_user: CurrentUser = Depends(get_current_user),
    service: TaskService = Depends(get_task_service),
):
    """Create a new task owned by the authenticated user."""
    task = service.create(
        user_id=current_user.user_id,
        title=task_data.title,
        description=task_data.description,
        due_date=task_data.due_date,
    )
    return _envelope(task)


@router.get("", response_model=TaskListResponse)
def list_tasks(
    current_user: CurrentUser = Depends(get_current_user),
    service: TaskService = Depends(get_task_service),
):
    """List all tasks of the authenticated user."""
    return _listing(service.list(current_user.user_id))


# Declared before /{task_id} so "search" is not taken for an id
@router.get("/search", response_model=TaskListResponse)
def search_tasks(
    title: str = Query("", description="Case-insensitive substring of the task title"),
    current_user: CurrentUser = Depends(get_current_user),
    service: TaskService = Depends(get_task_service),
):
    """Search the authenticated user's tasks by title."""
    return _listing(service.search_by_title(current_user.user_id, title))


@router.get("/{task_id}", response_model=TaskEnvelope)
def get_task(
    task_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    service: TaskService = Depends(get_task_service),
):
    """Get a specific task by ID."""
    return _envelope(service.get(current_user.user_id, task_id))


@router.put("/{task_id}", response_model=TaskEnvelope)
def update_task(
    task_id: str,
    task_data: TaskUpdate,
    current_user: CurrentUser = Depends(get_current_user),
    service: TaskService = Depends(get_task_service),
):
    """Replace the title, description, due date and status of a task."""
    task = service.update(
        user_id=current_user.user_id,
        task_id=task_id,
        title=task_data.title,
        description=task_data.description,
        due_date=task_data.due_date,
        status=task_data.status,
    )
    return _envelope(task)


@router.delete("/{task_id}", response_model=MessageResponse)
def delete_task(
    task_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    service: TaskService = Depends(get_task_service),
):
    """Delete a task."""
    service.delete(current_user.user_id, task_id)
    return MessageResponse(message="Task deleted successfully.")
