"""Observability configuration using Logfire.

Services use logfire directly:

    import logfire

    with logfire.span("vote_service.cast_vote", suggestion_id=str(suggestion.id)):
        ...
        logfire.info("Vote cast", vote_id=str(vote.id))
"""

import logfire
from sqlalchemy.ext.asyncio import AsyncEngine

from voter.config import Settings


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for observability.

    Telemetry is only sent to Logfire cloud when explicitly enabled with
    OBSERVABILITY__SEND_TO_LOGFIRE, or when OBSERVABILITY__LOGFIRE_TOKEN is
    set and sending is not explicitly disabled. Otherwise spans and logs go
    to the console only.

    Args:
        settings: Application settings
    """
    if settings.observability.send_to_logfire is not None:
        send_to_logfire = settings.observability.send_to_logfire
    else:
        send_to_logfire = bool(settings.observability.logfire_token)

    config_kwargs = {
        "service_name": "voter",
        "service_version": "0.1.0",
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
        debug=settings.debug,
        send_to_logfire=send_to_logfire,
        has_token=bool(settings.observability.logfire_token),
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace SQL statements, durations and transactions on an engine.

    Args:
        engine: SQLAlchemy async engine
    """
    logfire.instrument_sqlalchemy(
        engine=engine.sync_engine,
        enable_commenter=True,  # Add SQL comments with span context
    )
    logfire.info("SQLAlchemy instrumented")
