"""
GraphQL type definitions.

Only the shape clients see lives here; all store access goes through
``todo_graphql.services.todo_crud``.
"""

from typing import Optional

import strawberry

from todo_graphql import models


@strawberry.type(name="Todo")
class TodoType:
    id: Optional[strawberry.ID] = strawberry.field(description="Todo id")
    title: Optional[str] = strawberry.field(description="Task title")
    completed: Optional[bool] = strawberry.field(
        description="Flag to mark if the task is completed"
    )

    @classmethod
    def from_model(cls, todo: models.Todo) -> "TodoType":
        # copies the row, so the result stays valid after the row is deleted
        return cls(
            id=strawberry.ID(todo.id),
            title=todo.title,
            completed=todo.completed,
        )
