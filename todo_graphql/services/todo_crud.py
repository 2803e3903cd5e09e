"""
CRUD LAYER (Database Logic Only)

Architecture:
    GraphQL Layer → Strawberry (resolvers, context, types)
    CRUD Layer    → Pure DB operations (this file)
    DB Layer      → Engine, SessionLocal, Models

Rules:
- Accept SQLAlchemy Session explicitly, never open/close it here.
- Return ORM models, NOT GraphQL types.
- Commit only for CREATE/UPDATE/DELETE. Reads don't commit.
- "Todo not found" is not an error here: return None or False and let the
  resolver raise.
- Store errors (SQLAlchemyError) are never caught here.
"""

import logging

from sqlalchemy.orm import Session

from todo_graphql.models import Todo

logger = logging.getLogger(__name__)


def list_todos(session: Session) -> list[Todo]:
    # list all todo items, in whatever order the store returns them
    return session.query(Todo).all()


def list_completed_todos(session: Session) -> list[Todo]:
    return session.query(Todo).filter(Todo.completed.is_(True)).all()


def get_todo(session: Session, todo_id: str) -> Todo | None:
    # primary-key lookup, uses the identity map when possible
    return session.get(Todo, todo_id)


def create_todo(session: Session, title: str) -> Todo:
    todo_item = Todo(title=title, completed=False)
    session.add(todo_item)
    session.commit()
    session.refresh(todo_item)
    logger.debug("Created todo %s", todo_item.id)
    return todo_item


def update_todo(session: Session, todo_id: str, **values) -> Todo | None:
    # update a todo item by id
    todo_item = session.get(Todo, todo_id)
    if not todo_item:
        return None

    for key, value in values.items():
        setattr(todo_item, key, value)

    session.commit()
    session.refresh(todo_item)
    return todo_item


def toggle_todo(session: Session, todo_id: str) -> Todo | None:
    todo_item = session.get(Todo, todo_id)
    if not todo_item:
        return None
    return update_todo(session, todo_id, completed=not todo_item.completed)


def set_completed(session: Session, todo_ids: list[str], completed: bool) -> int:
    """
    Bulk update: one UPDATE ... WHERE id IN (...) statement.

    Returns the number of rows the database reports as matched.
    """
    count = (
        session.query(Todo)
        .filter(Todo.id.in_(todo_ids))
        .update({Todo.completed: completed}, synchronize_session=False)
    )
    session.commit()
    logger.debug("Set completed=%s on %d todos", completed, count)
    return count


def delete_todo(session: Session, todo_id: str) -> bool:
    # delete a todo item by id
    todo_item = session.get(Todo, todo_id)
    if not todo_item:
        return False

    session.delete(todo_item)
    session.commit()
    return True


def delete_todos(session: Session, todo_ids: list[str]) -> int:
    # bulk delete by id set
    count = (
        session.query(Todo)
        .filter(Todo.id.in_(todo_ids))
        .delete(synchronize_session=False)
    )
    session.commit()
    logger.debug("Deleted %d todos", count)
    return count
