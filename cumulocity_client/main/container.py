"""
Dependency container injection module - Main Layer

This module implements the dependency injection container
to simplify the management and lifecycle of dependencies
in the client.
"""

from contextlib import asynccontextmanager
from typing import Optional

from dependency_injector import containers, providers

from cumulocity_client.infrastructure.gateways import (
    ApplicationBinariesApi,
    AuditsApi,
    DeviceStatisticsApi,
    FeatureTogglesApi,
    RealtimeNotificationApi,
    UsageStatisticsApi,
    UsersApi,
)
from cumulocity_client.infrastructure.pipeline import (
    ApiPipeline,
    HttpxRequestExecutor,
)
from cumulocity_client.infrastructure.transport import CumulocityHttpClient
from cumulocity_client.shared import get_logger, update_logging_from_settings

from .config import AppSettings

logger = get_logger(__name__)


class AppContainer(containers.DeclarativeContainer):
    """Composition Root using dependecy-injector."""

    # Settings
    config = providers.Configuration()

    # Infrastructure
    http_client = providers.Singleton(
        CumulocityHttpClient,
        base_url=config.c8y.base_url,
        tenant=config.c8y.tenant,
        username=config.c8y.username,
        password=config.c8y.password,
        timeout=config.c8y.timeout,
        verify_ssl=config.c8y.verify_ssl,
        max_connections=config.c8y.max_connections,
    )

    request_executor = providers.Singleton(
        HttpxRequestExecutor,
        client=providers.Callable(lambda http: http.client, http_client),
    )

    pipeline = providers.Singleton(ApiPipeline, executor=request_executor)

    # API groups
    application_binaries_api = providers.Singleton(
        ApplicationBinariesApi, pipeline=pipeline
    )
    audits_api = providers.Singleton(AuditsApi, pipeline=pipeline)
    device_statistics_api = providers.Singleton(DeviceStatisticsApi, pipeline=pipeline)
    feature_toggles_api = providers.Singleton(FeatureTogglesApi, pipeline=pipeline)
    usage_statistics_api = providers.Singleton(UsageStatisticsApi, pipeline=pipeline)
    users_api = providers.Singleton(UsersApi, pipeline=pipeline)
    realtime_notification_api = providers.Singleton(
        RealtimeNotificationApi, pipeline=pipeline
    )


# -------------------------
# Global Container Instance
# -------------------------
_app_container: Optional[AppContainer] = None


def init_container(settings: AppSettings) -> AppContainer:
    """Initialize global container with client settings."""

    global _app_container

    update_logging_from_settings(settings)

    container = AppContainer()
    container.config.from_pydantic(settings)
    _app_container = container
    return container


def get_container() -> AppContainer:
    """Get the initialized global container."""

    if _app_container is None:
        raise RuntimeError("Container has not been initialized yet")

    return _app_container


@asynccontextmanager
async def client_lifespan():
    """
    Centralized lifecycle management of the connection pool.

    Yields the initialized container and closes the shared HTTP client
    on exit, also when the body raises or is cancelled.
    """
    container = get_container()
    http_client = container.http_client()

    try:
        logger.info("container.http_client.ready", base_url=http_client.base_url)
        yield container

    finally:
        logger.info("container.http_client.close")
        await http_client.close()
        container.reset_singletons()

        logger.info("container.resources.shutdown")
