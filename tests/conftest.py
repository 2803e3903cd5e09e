import asyncio
import os

# every test runs against a private in-memory database
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SEED_DB"] = "false"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

import todo_graphql.models  # noqa: E402,F401
from todo_graphql.core.database import Base, SessionLocal, engine  # noqa: E402
from todo_graphql.graphql import schema  # noqa: E402
from todo_graphql.main import app  # noqa: E402


@pytest.fixture
def db_session():
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db_session):
    return TestClient(app)


@pytest.fixture
def execute(db_session):
    """Run a GraphQL operation against the schema with the test session."""

    def _execute(query, **variables):
        return asyncio.run(
            schema.execute(
                query,
                variable_values=variables or None,
                context_value={"db": db_session},
            )
        )

    return _execute


@pytest.fixture
def graphql(client):
    """POST a GraphQL operation to the HTTP endpoint and return the JSON body."""

    def _post(query, **variables):
        response = client.post("/graphql", json={"query": query, "variables": variables})
        assert response.status_code == 200
        return response.json()

    return _post
