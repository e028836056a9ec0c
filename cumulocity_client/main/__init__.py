"""
Main module - Main/Composition Root Layer

This module serves as the entry point of the client, wiring the
configuration, the shared HTTP connection pool, the request pipeline and
the API groups together.

Its primary responsibilities include:
- Loading settings from the environment (Composition Root)
- Configuring logging
- Managing the lifecycle of the connection pool
"""

from .config import AppSettings, CumulocitySettings, LoggingSettings, get_settings
from .container import AppContainer, client_lifespan, get_container, init_container

__all__ = [
    "AppSettings",
    "CumulocitySettings",
    "LoggingSettings",
    "get_settings",
    "AppContainer",
    "init_container",
    "get_container",
    "client_lifespan",
]
