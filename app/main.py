"""
Main application entry point.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api.v1 import dependencies
from app.api.v1.book_endpoints import router as books_router
from app.api.v1.dependencies import DatabaseUnavailableError, require_database_ready

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Connect the database, load the static dataset and seed the catalog.

    Seeding runs as soon as the connection is READY: right away when the
    initial ping succeeds, otherwise on the first successful heartbeat.
    A failing seed at startup aborts the server.
    """
    connection = dependencies.get_database_connection()
    state = connection.connect()
    logger.info("Database connection state at startup: %s", state.value)

    dependencies.get_static_dataset()

    connection.when_ready(lambda: dependencies.get_seeding_service().seed())

    yield

    dependencies.reset_dependencies()


app = FastAPI(
    title="The Book API",
    description="Book catalog: search, ISBN lookup and language filters.",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# Generated documentation stays reachable while the database is down.
UNGATED_PATHS = frozenset({"/docs", "/docs/oauth2-redirect", "/redoc", "/openapi.json"})


@app.middleware("http")
async def readiness_gate(request: Request, call_next):
    """Answer 503 for every request while the database is not READY."""
    if request.url.path not in UNGATED_PATHS:
        try:
            require_database_ready()
        except DatabaseUnavailableError:
            return JSONResponse(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                content={"error": "Service unavailable"},
            )
    return await call_next(request)


# Outermost: wraps the readiness gate.
app.add_middleware(
    CORSMiddleware,
    allow_origins=dependencies.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Include API routers
app.include_router(books_router, tags=["books"])


if __name__ == "__main__":
    import uvicorn

    logging.basicConfig(
        level=dependencies.LOG_LEVEL,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logger.info("Server running on http://localhost:%s", dependencies.PORT)
    uvicorn.run("app.main:app", host=dependencies.HOST, port=dependencies.PORT)
