"""Observability configuration using Logfire.

Usage:
    import logfire

    # Structured events
    logfire.info("Comment created", comment_id=comment.id, depth=comment.depth)

    # Domain services trace through Service.span, which prefixes the name
    with self.span("get_comments", discussion_id=discussion_id):
        ...
"""

import logfire
from sqlalchemy.ext.asyncio import AsyncEngine

from showtalk.config import Settings

SERVICE_NAME = "showtalk-comments"
SERVICE_VERSION = "0.1.0"

_httpx_instrumented = False


def should_send_to_logfire(settings: Settings) -> bool:
    """Decide whether spans leave the process.

    An explicit OBSERVABILITY__SEND_TO_LOGFIRE wins; otherwise sending is on
    exactly when a token is configured.
    """
    observability = settings.observability
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return bool(observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for the comment service and its scripts.

    Args:
        settings: Application settings
    """
    send_to_logfire = should_send_to_logfire(settings)

    config_kwargs = {
        "service_name": SERVICE_NAME,
        "service_version": SERVICE_VERSION,
        "environment": settings.environment,
        "send_to_logfire": send_to_logfire,
        "console": logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    }
    if settings.observability.logfire_token:
        config_kwargs["token"] = settings.observability.logfire_token

    logfire.configure(**config_kwargs)

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        max_depth=settings.comments.max_depth,
        ranking_candidate_limit=settings.comments.ranking_candidate_limit,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace every SQL statement, including both writes of a comment create.

    Args:
        engine: SQLAlchemy async engine
    """
    logfire.instrument_sqlalchemy(
        engine=engine.sync_engine,
        enable_commenter=True,  # SQL comments carry the span context
    )
    logfire.info("SQLAlchemy instrumented", dialect=engine.dialect.name)


def instrument_httpx() -> None:
    """Trace outbound identity provider lookups.

    Instrumentation is process-wide, so repeated calls are no-ops.
    """
    global _httpx_instrumented
    if _httpx_instrumented:
        return
    logfire.instrument_httpx()
    _httpx_instrumented = True
    logfire.info("httpx instrumented")
