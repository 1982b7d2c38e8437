"""Human-readable output for sync runs."""

from .stdout import StdoutReporter

__all__ = ["StdoutReporter"]
