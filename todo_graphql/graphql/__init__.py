from .schema import create_graphql_router, schema
from .types import TodoType

__all__ = ["schema", "create_graphql_router", "TodoType"]
