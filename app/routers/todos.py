"""Todo router exposing the per-user todo list."""
from fastapi import APIRouter, Depends, Path, Request, Response, status
from typing import List

from app.schemas.todo import AddTodoRequest, DeleteTodoRequest
from app.services.todo_store import TodoStore
from app.utils.metrics import MetricsCollector

router = APIRouter(tags=["Todos"])

USERNAME_DESCRIPTION = "The name of the user."


def get_todo_store(request: Request) -> TodoStore:
    """Dependency for getting the application's TodoStore."""
    return request.app.state.todo_store


def get_metrics(request: Request) -> MetricsCollector:
    """Dependency for getting the application's metrics collector."""
    return request.app.state.metrics


@router.post(
    "/todos/{username}",
    response_model=str,
    operation_id="addTodo",
    summary="Add a todo to the list",
)
def add_todo(
    body: AddTodoRequest,
    username: str = Path(..., description=USERNAME_DESCRIPTION),
    store: TodoStore = Depends(get_todo_store),
    metrics: MetricsCollector = Depends(get_metrics),
):
    todo = store.add(username, body.todo)
    metrics.todo_added()
    return todo


@router.get(
    "/todos/{username}",
    response_model=List[str],
    operation_id="getTodos",
    summary="Get the list of todos",
    response_description="The list of todos",
)
def get_todos(
    username: str = Path(..., description=USERNAME_DESCRIPTION),
    store: TodoStore = Depends(get_todo_store),
    metrics: MetricsCollector = Depends(get_metrics),
):
    metrics.todos_listed()
    return store.list(username)


@router.delete(
    "/todos/{username}",
    status_code=status.HTTP_200_OK,
    operation_id="deleteTodo",
    summary="Delete a todo from the list",
    response_class=Response,
)
def delete_todo(
    body: DeleteTodoRequest,
    username: str = Path(..., description=USERNAME_DESCRIPTION),
    store: TodoStore = Depends(get_todo_store),
    metrics: MetricsCollector = Depends(get_metrics),
):
    """Out-of-range indices and unknown users are ignored; the response is always empty."""
    removed = store.delete(username, body.todo_idx)
    metrics.todo_deleted(removed)
    return Response(status_code=status.HTTP_200_OK)
