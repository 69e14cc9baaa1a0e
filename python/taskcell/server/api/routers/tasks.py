"""Tasks router for TaskCell Server."""

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from loguru import logger

from taskcell.core.task import Task, TaskNotFoundError, TaskStore

from ..schemas import (
    CreateTaskRequest,
    ErrorResponse,
    TaskData,
    TaskListResponse,
    TaskResponse,
    UpdateTaskRequest,
)

TASK_NOT_FOUND = "task not found"
SOMETHING_WENT_WRONG = "something went wrong"


def get_task_store(request: Request) -> TaskStore:
    """Return the store owned by the running application."""
    return request.app.state.task_store


def create_tasks_router() -> APIRouter:
    """Create and configure the tasks router."""

    router = APIRouter(
        prefix="/tasks",
        tags=["tasks"],
        responses={
            400: {"model": ErrorResponse, "description": "Malformed request"},
            500: {"model": ErrorResponse, "description": "Internal error"},
        },
    )

    @router.get(
        "",
        response_model=TaskListResponse,
        summary="List tasks",
        description="Return every task, newest first",
    )
    async def list_tasks(store: TaskStore = Depends(get_task_store)):
        try:
            tasks = store.list_tasks()
        except Exception:
            logger.exception("TaskStore.list_tasks failed")
            raise HTTPException(status_code=500, detail=SOMETHING_WENT_WRONG)
        return TaskListResponse.from_tasks(tasks)

    @router.get(
        "/{task_id}",
        response_model=TaskResponse,
        summary="Get a task",
        responses={404: {"model": ErrorResponse}},
    )
    async def get_task(task_id: int, store: TaskStore = Depends(get_task_store)):
        try:
            task = store.get_task(task_id)
        except TaskNotFoundError:
            raise HTTPException(status_code=404, detail=TASK_NOT_FOUND)
        except Exception:
            logger.exception("TaskStore.get_task failed, task_id={}", task_id)
            raise HTTPException(status_code=500, detail=SOMETHING_WENT_WRONG)
        return TaskResponse(result=TaskData.from_task(task))

    @router.post(
        "",
        response_model=TaskResponse,
        status_code=status.HTTP_201_CREATED,
        summary="Create a task",
    )
    async def create_task(
        task_data: CreateTaskRequest, store: TaskStore = Depends(get_task_store)
    ):
        try:
            task = store.create_task(task_data.name)
        except Exception:
            logger.exception("TaskStore.create_task failed")
            raise HTTPException(status_code=500, detail=SOMETHING_WENT_WRONG)
        return TaskResponse(result=TaskData.from_task(task))

    @router.put(
        "/{task_id}",
        response_model=TaskResponse,
        summary="Replace a task's name and status",
        responses={404: {"model": ErrorResponse}},
    )
    async def update_task(
        task_id: int,
        task_data: UpdateTaskRequest,
        store: TaskStore = Depends(get_task_store),
    ):
        # IDs start at 1, so anything lower can never match a stored task
        if task_id < 1:
            raise HTTPException(status_code=404, detail=TASK_NOT_FOUND)

        task = Task(id=task_id, name=task_data.name, status=task_data.status)
        try:
            store.update_task(task)
        except TaskNotFoundError:
            raise HTTPException(status_code=404, detail=TASK_NOT_FOUND)
        except Exception:
            logger.exception("TaskStore.update_task failed, task_id={}", task_id)
            raise HTTPException(status_code=500, detail=SOMETHING_WENT_WRONG)
        return TaskResponse(result=TaskData.from_task(task))

    @router.delete(
        "/{task_id}",
        status_code=status.HTTP_204_NO_CONTENT,
        response_class=Response,
        summary="Delete a task",
        description="Deleting a task that does not exist also succeeds",
    )
    async def delete_task(task_id: int, store: TaskStore = Depends(get_task_store)):
        try:
            store.delete_task(task_id)
        except Exception:
            logger.exception("TaskStore.delete_task failed, task_id={}", task_id)
            raise HTTPException(status_code=500, detail=SOMETHING_WENT_WRONG)
        return Response(
            status_code=status.HTTP_204_NO_CONTENT, media_type="application/json"
        )

    return router
