"""
Shared module - Cross-cutting concerns / Shared Layer

This module provides shared utilities, constants, and enums that are used
across multiple layers of the client.

Its primary responsibilities include:
- Defining cross-layer constants (environment names, log levels, HTTP verbs
  and generic media types)
- Centralizing logging configuration
- Serving as a common place for definitions that do not belong
  exclusively to Domain, Infrastructure or Main

Following Clean Architecture principles:
- Shared module contains only *cross-cutting concerns*
- It must not depend on Infrastructure or Frameworks
"""

from .consts import EnumEnvironment, EnumHttpMethod, EnumLogLevel, EnumMediaType
from .logging import configure_logging, get_logger, update_logging_from_settings

__all__ = [
    "EnumEnvironment",
    "EnumHttpMethod",
    "EnumLogLevel",
    "EnumMediaType",
    "configure_logging",
    "get_logger",
    "update_logging_from_settings",
]
