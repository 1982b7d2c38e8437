"""Shared type aliases for blurhash-map."""

from .common import HashMapData, HashMapEntry, SyncAction

__all__ = ["HashMapData", "HashMapEntry", "SyncAction"]
