"""
Domain Layer Package

This package contains the transport entities, wire models, error taxonomy
and API interfaces of the client, without dependencies on the HTTP stack.
"""

# Re-export submodules
from cumulocity_client.domain import entities, gateways, ports

__all__ = ["entities", "gateways", "ports"]
