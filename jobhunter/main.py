"""
Job Hunter API - Main Application

FastAPI backend with:
- PostgreSQL for accounts, companies and profiles
- bcrypt password hashing
- JWT session tokens with role-based access control

Run: jobhunter  (or: uvicorn jobhunter.main:app --reload)
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from jobhunter import __version__
from jobhunter.api.routes import api_router
from jobhunter.core.config import get_settings
from jobhunter.core.error_handler import register_exception_handlers
from jobhunter.core.logging_config import setup_logging
from jobhunter.core.request_id import RequestIdMiddleware, get_request_id
from jobhunter.db.postgres import check_database_connection, engine
from jobhunter.db.tables import metadata

settings = get_settings()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.log_level)
    logger.info("Starting Job Hunter API %s", __version__)
    if settings.uses_default_secret:
        logger.warning("JWT_SECRET_KEY is not set; using the built-in default secret")

    metadata.create_all(bind=engine)
    logger.info("Database schema ready")

    yield

    engine.dispose()
    logger.info("Database connections closed")


app = FastAPI(
    title="Job Hunter API",
    description="""
    Backend for a job-hunting platform.

    ## Features
    - **Authentication**: login and applicant signup with bearer tokens
    - **Admin**: admin/recruiter accounts and company management
    - **Profile**: phone numbers, education, experience, certifications,
      projects and skills, each scoped to the logged-in user
    - **Skills**: catalogue search
    """,
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(RequestIdMiddleware)

register_exception_handlers(app)

app.include_router(api_router, prefix="/api/v1")


@app.get("/api/v1/health", tags=["Health"])
def health_check():
    """Liveness plus database reachability."""
    return {
        "status": "healthy",
        "database": "connected" if check_database_connection() else "disconnected",
        "request_id": get_request_id(),
    }


def run() -> None:
    """Console entry point. In-flight requests get a grace period on shutdown."""
    uvicorn.run(
        "jobhunter.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        timeout_graceful_shutdown=settings.shutdown_grace_seconds,
    )


if __name__ == "__main__":
    run()
