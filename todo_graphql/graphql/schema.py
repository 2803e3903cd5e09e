"""
GraphQL schema: the ``todos`` query, the six todo mutations, and the router
that serves them from FastAPI.

Resolvers are async and run every blocking store call in the threadpool.
"""

import logging
from typing import List, Optional

import strawberry
from fastapi import Depends
from sqlalchemy.orm import Session
from starlette.concurrency import run_in_threadpool
from strawberry.fastapi import GraphQLRouter
from strawberry.types import Info

from todo_graphql.core.database import get_db
from todo_graphql.exceptions import TodoNotFoundError
from todo_graphql.graphql.types import TodoType
from todo_graphql.services import todo_crud

logger = logging.getLogger(__name__)

TodoList = Optional[List[Optional[TodoType]]]


def _db(info: Info) -> Session:
    return info.context["db"]


def _to_types(todos) -> List[TodoType]:
    return [TodoType.from_model(todo) for todo in todos]


def _not_found(todo_id: str) -> TodoNotFoundError:
    logger.warning("Todo %s not found", todo_id)
    return TodoNotFoundError(todo_id)


@strawberry.type
class Query:
    @strawberry.field(description="List all todos")
    async def todos(self, info: Info) -> TodoList:
        todos = await run_in_threadpool(todo_crud.list_todos, _db(info))
        return _to_types(todos)


@strawberry.type
class Mutation:
    @strawberry.mutation(description="Add a Todo")
    async def add(self, info: Info, title: str) -> Optional[TodoType]:
        todo = await run_in_threadpool(todo_crud.create_todo, _db(info), title)
        logger.info("Added todo %s", todo.id)
        return TodoType.from_model(todo)

    @strawberry.mutation(description="Toggle the todo")
    async def toggle(self, info: Info, id: str) -> Optional[TodoType]:
        todo = await run_in_threadpool(todo_crud.toggle_todo, _db(info), id)
        if todo is None:
            raise _not_found(id)
        logger.info("Toggled todo %s to completed=%s", todo.id, todo.completed)
        return TodoType.from_model(todo)

    @strawberry.mutation(description="Toggle all todos")
    async def toggle_all(self, info: Info, checked: bool) -> TodoList:
        db = _db(info)
        todos = await run_in_threadpool(todo_crud.list_todos, db)
        todo_ids = [todo.id for todo in todos]
        await run_in_threadpool(todo_crud.set_completed, db, todo_ids, checked)
        logger.info("Set completed=%s on %d todos", checked, len(todo_ids))
        return _to_types(await run_in_threadpool(todo_crud.list_todos, db))

    @strawberry.mutation(description="Destroy the todo")
    async def destroy(self, info: Info, id: str) -> Optional[TodoType]:
        db = _db(info)
        todo = await run_in_threadpool(todo_crud.get_todo, db, id)
        if todo is None:
            raise _not_found(id)

        removed = TodoType.from_model(todo)
        await run_in_threadpool(todo_crud.delete_todo, db, id)
        logger.info("Destroyed todo %s", id)
        return removed

    @strawberry.mutation(description="Clear completed")
    async def clear_completed(self, info: Info) -> TodoList:
        db = _db(info)
        removed = _to_types(await run_in_threadpool(todo_crud.list_completed_todos, db))
        await run_in_threadpool(todo_crud.delete_todos, db, [todo.id for todo in removed])
        logger.info("Cleared %d completed todos", len(removed))
        return removed

    @strawberry.mutation(description="Edit a todo")
    async def save(self, info: Info, id: str, title: str) -> Optional[TodoType]:
        todo = await run_in_threadpool(todo_crud.update_todo, _db(info), id, title=title)
        if todo is None:
            raise _not_found(id)
        logger.info("Saved todo %s", todo.id)
        return TodoType.from_model(todo)


schema = strawberry.Schema(query=Query, mutation=Mutation)


async def get_context(db: Session = Depends(get_db)) -> dict:
    """GraphQL context: one database session per request."""
    return {"db": db}


def create_graphql_router(graphiql: bool = True) -> GraphQLRouter:
    return GraphQLRouter(
        schema,
        context_getter=get_context,
        graphql_ide="graphiql" if graphiql else None,
    )
