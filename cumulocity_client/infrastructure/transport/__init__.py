"""
Transport package - Infrastructure Layer

This package owns the pooled HTTP connection to the Cumulocity tenant
shared by every API group of a client.
"""

from cumulocity_client.infrastructure.transport.http_client import CumulocityHttpClient

__all__ = ["CumulocityHttpClient"]
