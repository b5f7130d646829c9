"""Application services for the npm task."""

from .service import NpmTaskService

__all__ = ["NpmTaskService"]
