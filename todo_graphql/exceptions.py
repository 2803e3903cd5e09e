from graphql import GraphQLError


class TodoNotFoundError(GraphQLError):
    """Raised by a resolver when no todo exists for the requested id."""

    def __init__(self, todo_id: str):
        super().__init__(
            f"Todo not found with id {todo_id}",
            extensions={"code": "NOT_FOUND"},
        )
        self.todo_id = todo_id
