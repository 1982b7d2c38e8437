"""Configuration-related exceptions."""

from __future__ import annotations

from blurhash_map.exceptions.base import BlurHashMapError


class InvalidConfiguration(BlurHashMapError, ValueError):
    """Raised when the run configuration is invalid.

    ``violations`` holds one human-readable entry per offending value so
    callers can report every problem at once.
    """

    def __init__(self, message: str, violations: tuple[str, ...] = ()) -> None:
        super().__init__(message)
        self.violations = violations or (message,)


ConfigError = InvalidConfiguration
