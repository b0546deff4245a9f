"""Repository protocol definitions (interfaces)."""

from portfolio_tracker.repositories.protocols.kv_store import KeyValueStore

__all__ = [
    "KeyValueStore",
]
