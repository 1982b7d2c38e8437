"""Aggregated JSON index of image hashes."""

from __future__ import annotations

from .builder import IndexBuilder

__all__ = ["IndexBuilder"]
