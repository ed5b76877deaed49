"""Collector for diagnostics that must not abort the translation run."""

import logging

logger = logging.getLogger(__name__)


class ErrorReporter:
    """Records and logs errors and warnings reported during a run."""

    def __init__(self) -> None:
        """Start with no recorded diagnostics."""
        self.errors: list[str] = []
        self.warnings: list[str] = []

    @property
    def error_count(self) -> int:
        """Number of errors reported so far."""
        return len(self.errors)

    @property
    def warning_count(self) -> int:
        """Number of warnings reported so far."""
        return len(self.warnings)

    def error(self, message: str) -> None:
        """Report an error; translation of other types continues."""
        self.errors.append(message)
        logger.error("%s", message)

    def warning(self, message: str) -> None:
        """Report a warning."""
        self.warnings.append(message)
        logger.warning("%s", message)

    def has_errors(self) -> bool:
        """Check if any error was reported."""
        return bool(self.errors)

    def reset(self) -> None:
        """Forget all recorded diagnostics."""
        self.errors.clear()
        self.warnings.clear()
