"""External blur hash encoder integration."""

from __future__ import annotations

from .invoker import EncoderInvoker

__all__ = ["EncoderInvoker"]
