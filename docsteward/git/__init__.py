"""Read-only git queries."""

from .metadata import RepositoryMetadataReader

__all__ = ["RepositoryMetadataReader"]
