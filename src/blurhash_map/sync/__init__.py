"""Side-car reconciliation."""

from __future__ import annotations

from .synchronizer import SidecarSynchronizer

__all__ = ["SidecarSynchronizer"]
