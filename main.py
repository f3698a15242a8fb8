"""
Main entry point for the Hiring Pipeline API.

Runs the FastAPI app with uvicorn. With a SQLite DATABASE_URL the tables are
created on startup; PostgreSQL deployments use `alembic upgrade head`.
"""

import uvicorn

from config.settings import settings
from utils.database import create_db_and_tables


def main():
    if settings.DATABASE_URL.startswith("sqlite"):
        create_db_and_tables()

    uvicorn.run(
        "api.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
