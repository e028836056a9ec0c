"""Domain ports package."""

from .request_executor import IRequestExecutor

__all__ = ["IRequestExecutor"]
