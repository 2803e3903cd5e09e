import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from todo_graphql.core.config import settings
from todo_graphql.core.database import check_connection, engine, init_db, seed_db
from todo_graphql.graphql import create_graphql_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Starting up %s...", settings.APP_NAME)
    check_connection()

    # init database (create tables)
    if not settings.SKIP_DB_INIT:
        init_db()

    # seed database with initial data (development only)
    # Set SEED_DB=true in .env or os.environ to enable seeding
    if settings.SEED_DB:
        seed_db()

    yield
    logger.info("Shutting down %s...", settings.APP_NAME)
    engine.dispose()


app = FastAPI(title=settings.APP_NAME, debug=settings.DEBUG, lifespan=lifespan)


@app.get("/")
def health_check():
    return {"status": "ok"}


app.include_router(
    prefix=settings.GRAPHQL_PATH,
    tags=["graphql"],
    router=create_graphql_router(graphiql=settings.GRAPHIQL),
)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "todo_graphql.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
    )
