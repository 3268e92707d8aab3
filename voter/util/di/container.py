"""Dependency injection container."""

from typing import Optional

from dishka import AsyncContainer, make_async_container

from voter.config import Settings
from voter.util.di import PROVIDERS, get_provider
from voter.util.logging import setup_logging
from voter.util.observability import configure_logfire


def create_container(settings: Optional[Settings] = None) -> AsyncContainer:
    """Build production container (all prod implementations).

    Args:
        settings: Settings to serve from the container, loaded from
            environment variables when omitted

    Returns:
        Configured DI container with production providers
    """
    provider_instances = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    return make_async_container(
        *provider_instances, context={Settings: settings or Settings()}
    )


def bootstrap(settings: Optional[Settings] = None) -> AsyncContainer:
    """Configure logging and observability, then build the production container.

    The same settings drive logging, Logfire and every provider.

    Args:
        settings: Application settings, loaded from the environment when omitted

    Returns:
        Production DI container
    """
    settings = settings or Settings()
    setup_logging(settings)
    configure_logfire(settings)
    return create_container(settings)
