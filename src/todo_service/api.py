# todo_service/api.py
from typing import Callable, List, Type, TypeVar

from fastapi import APIRouter, Depends, HTTPException, Request, Response
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .constants import LOGGER
from .exceptions import TodoNotFoundError
from .models import Todo
from .store import TodoStore


class CreatePayload(BaseModel):
    model_config = ConfigDict(strict=True)

    description: str = ""


class CheckPayload(BaseModel):
    model_config = ConfigDict(strict=True)

    completed: bool = False


class TodoResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    description: str
    completed: bool
    created_at: int = Field(alias="createdAt")

    @classmethod
    def from_domain(cls, todo: Todo) -> "TodoResponse":
        return cls(id=todo.id, description=todo.description, completed=todo.completed, created_at=todo.created_at)


class TodoEnvelope(BaseModel):
    todo: TodoResponse


class TodoListEnvelope(BaseModel):
    todos: List[TodoResponse]


def get_store(request: Request) -> TodoStore:
    return request.app.state.container.get(TodoStore)


P = TypeVar("P", bound=BaseModel)


def json_body(model: Type[P]) -> Callable[[Request], P]:
    """Decode the raw request body as JSON into ``model``, whatever its Content-Type.

    A JSON ``null`` decodes to the model's defaults. Failures are raised as
    :class:`RequestValidationError` so they reach :func:`malformed_body_handler`.
    """

    async def decode(request: Request) -> P:
        raw = await request.body()
        if raw.strip() == b"null":
            return model()
        try:
            return model.model_validate_json(raw)
        except ValidationError as e:
            errors = e.errors(include_url=False, include_input=False)
            raise RequestValidationError([{**err, "loc": ("body", *err["loc"])} for err in errors])

    return decode


router = APIRouter()


@router.get("/todos", response_model=TodoListEnvelope)
def list_todos(store: TodoStore = Depends(get_store)):
    return TodoListEnvelope(todos=[TodoResponse.from_domain(t) for t in store.list()])


@router.post("/todos", response_model=TodoEnvelope)
def create_todo(payload: CreatePayload = Depends(json_body(CreatePayload)), store: TodoStore = Depends(get_store)):
    todo = store.create(payload.description)
    return TodoEnvelope(todo=TodoResponse.from_domain(todo))


@router.put("/todos/{todo_id}", response_model=TodoEnvelope)
def check_todo(todo_id: str, payload: CheckPayload = Depends(json_body(CheckPayload)), store: TodoStore = Depends(get_store)):
    try:
        todo = store.check(todo_id, payload.completed)
    except TodoNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return TodoEnvelope(todo=TodoResponse.from_domain(todo))


@router.delete("/todos/{todo_id}")
def delete_todo(todo_id: str, store: TodoStore = Depends(get_store)):
    store.delete(todo_id)
    return Response(status_code=200)


async def malformed_body_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report undecodable or mistyped request bodies as 400 instead of FastAPI's 422."""
    LOGGER.info("Rejected %s %s: %d validation error(s)", request.method, request.url.path, len(exc.errors()))
    return JSONResponse(status_code=400, content={"detail": jsonable_encoder(exc.errors())})
