"""Key-value store protocol."""

from typing import Protocol, Optional


class KeyValueStore(Protocol):
    """Interface for the device-style key-value storage holding JSON blobs."""

    def get(self, key: str) -> Optional[str]:
        """Return the value stored under key, or None."""
        ...

    def set(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value."""
        ...

    def delete(self, key: str) -> None:
        """Remove key if present."""
        ...
