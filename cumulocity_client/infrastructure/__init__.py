"""
Infrastructure Layer Package

This package contains implementations of interfaces defined in the
domain layer: the httpx based request pipeline and the API groups
built on top of it.
"""

from cumulocity_client.infrastructure import gateways, pipeline, transport

__all__ = ["gateways", "pipeline", "transport"]
