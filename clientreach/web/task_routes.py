"""Task CRUD routes backed by the SQLite task store."""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from ..infrastructure.persistence import Database
from .dependencies import get_database
from .schemas import TaskCreate, TaskListResponse, TaskResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/tasks", tags=["Tasks"])


def _not_found() -> JSONResponse:
    return JSONResponse(status_code=404, content={"success": False, "error": "Object not found"})


@router.get("", summary="List Tasks", response_model=TaskListResponse)
def list_tasks(
    page: int = Query(0, ge=0, description="Page number"),
    is_completed: Optional[bool] = Query(None, alias="isCompleted", description="Filter by completed flag"),
    db: Database = Depends(get_database),
):
    tasks = db.list_tasks(page=page, completed=is_completed)
    return {"success": True, "tasks": [t.to_dict() for t in tasks]}


@router.post("", summary="Create a new Task", response_model=TaskResponse)
def create_task(body: TaskCreate, db: Database = Depends(get_database)):
    task = db.add_task(
        name=body.name,
        slug=body.slug,
        description=body.description or "",
        completed=body.completed,
        due_date=body.due_date.isoformat(),
    )
    if not task:
        return JSONResponse(
            status_code=409,
            content={"success": False, "error": "Task with this slug already exists"},
        )
    logger.info(f"Created task {task.slug}")
    return {"success": True, "task": task.to_dict()}


@router.get("/{task_slug}", summary="Get a single Task by slug", response_model=TaskResponse)
def fetch_task(task_slug: str, db: Database = Depends(get_database)):
    task = db.get_task(task_slug)
    if not task:
        return _not_found()
    return {"success": True, "task": task.to_dict()}


@router.delete("/{task_slug}", summary="Delete a Task", response_model=TaskResponse)
def delete_task(task_slug: str, db: Database = Depends(get_database)):
    task = db.delete_task(task_slug)
    if not task:
        return _not_found()
    return {"success": True, "task": task.to_dict()}
