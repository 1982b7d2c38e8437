"""Core data models for blurhash-map."""

from .entities import SyncReport

__all__ = ["SyncReport"]
