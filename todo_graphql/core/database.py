import json
import logging

from sqlalchemy import create_engine, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.engine import make_url
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from todo_graphql.core.config import settings

logger = logging.getLogger(__name__)


def _engine_options(database_url: str) -> dict:
    url = make_url(database_url)
    if url.get_backend_name() != "sqlite":
        return {}

    options = {"connect_args": {"check_same_thread": False}}
    # in-memory sqlite lives inside one connection, share it across sessions
    if url.database in (None, "", ":memory:"):
        options["poolclass"] = StaticPool
    return options


# Create the SQLAlchemy engine
engine = create_engine(
    settings.DATABASE_URL,
    echo=settings.DEBUG,
    **_engine_options(settings.DATABASE_URL),
)

# Create sessionmaker factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Create a base class for our models
Base = declarative_base()


# Dependency to get a database session
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


# open one connection so a bad DATABASE_URL shows up at startup
def check_connection(bind=None):
    bind = bind or engine
    try:
        with bind.connect() as connection:
            connection.execute(text("SELECT 1"))
    except SQLAlchemyError:
        logger.exception("Database connection failed (%s)", bind.url.render_as_string())
        raise
    logger.info("Database connected (%s)", bind.url.render_as_string())


# init db
def init_db():
    # important: ensures models are registered before creating tables
    import todo_graphql.models  # noqa: F401

    Base.metadata.create_all(bind=engine)
    logger.info("Database tables initialized")


# seed_db() - ONLY loads data, and only into an empty table
def seed_db(seed_file=None) -> int:
    from todo_graphql.models import Todo

    seed_file = seed_file or settings.SEED_FILE
    if not seed_file.exists():
        logger.warning("Seed file %s not found, skipping seeding", seed_file)
        return 0

    session = SessionLocal()
    try:
        if session.query(Todo).count() > 0:
            return 0

        with open(seed_file, "r") as f:
            todos_data = json.load(f)

        for todo_data in todos_data:
            session.add(
                Todo(
                    title=todo_data["title"],
                    completed=bool(todo_data.get("completed", False)),
                )
            )

        session.commit()
        logger.info("Loaded %d todos from %s", len(todos_data), seed_file)
        return len(todos_data)
    finally:
        session.close()
