import uuid

from sqlalchemy import Boolean, Column, String

from todo_graphql.core.database import Base


def generate_todo_id() -> str:
    return uuid.uuid4().hex


class Todo(Base):
    """
    Model for a TODO.
    Note: The class name is singular (Todo) while the table name is plural (todos).
    The id is generated on insert and is the only identifier exposed to clients.
    """

    __tablename__ = "todos"

    id = Column(String(32), primary_key=True, index=True, default=generate_todo_id)
    title = Column(String(255), nullable=False)
    completed = Column(Boolean, nullable=False, default=False)

    def __repr__(self) -> str:
        return f"<Todo id={self.id!r} title={self.title!r} completed={self.completed}>"
