"""Exceptions raised while loading or persisting header mappings."""

from pathlib import Path


class HeaderMapError(Exception):
    """Base class for header mapping failures."""


class MappingLoadError(HeaderMapError):
    """An explicitly named mapping resource could not be read or parsed."""

    def __init__(self, resource: str, cause: Exception) -> None:
        """Record the resource name and the underlying failure."""
        self.resource = resource
        self.cause = cause
        super().__init__(f"Cannot load header mappings from {resource}: {cause}")


class MappingWriteError(HeaderMapError):
    """The output mapping file could not be created or written."""

    def __init__(self, path: Path, cause: Exception) -> None:
        """Record the destination path and the underlying failure."""
        self.path = path
        self.cause = cause
        super().__init__(f"Cannot write header mappings to {path}: {cause}")
