"""Infrastructure layer implementations."""

from buildops.infrastructure import storage

__all__ = ["storage"]
