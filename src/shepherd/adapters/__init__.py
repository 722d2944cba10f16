"""Adapters - implementations of ports."""

from .memory_store import InMemoryTaskRepository

__all__ = [
    "InMemoryTaskRepository",
]
