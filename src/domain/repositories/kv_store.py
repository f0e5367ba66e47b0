"""Key/value store protocol."""

from typing import Protocol


class IKeyValueStore(Protocol):
    """Process-external string key/value store.

    Implementations may raise on any call; callers own the recovery policy.
    """

    def get(self, key: str) -> str | None:
        """Get the value stored under a key, or None if absent."""
        ...

    def set(self, key: str, value: str) -> None:
        """Store a value under a key, replacing any previous value."""
        ...

    def delete(self, key: str) -> None:
        """Remove a key. Missing keys are ignored."""
        ...

    def close(self) -> None:
        """Release any held resources."""
        ...
