#!/usr/bin/env python3
"""Apply Alembic migrations for the comment store, reporting to Logfire."""

import sys

import logfire
from alembic import command
from alembic.config import Config

from showtalk.config import Settings
from showtalk.util.logging import setup_logging
from showtalk.util.observability import configure_logfire


def main() -> int:
    """Upgrade the schema to head; failures are logged then re-raised."""
    settings = Settings()

    setup_logging(settings)
    configure_logfire(settings)

    try:
        logfire.info("Starting database migrations", environment=settings.environment)

        alembic_cfg = Config("alembic.ini")
        alembic_cfg.set_main_option("sqlalchemy.url", settings.database_url)
        command.upgrade(alembic_cfg, "head")

        logfire.info("Database migrations completed successfully")
        return 0

    except Exception as e:
        logfire.error(
            "Database migration failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Re-raise so deploys stop on a broken schema
        raise


if __name__ == "__main__":
    sys.exit(main())
