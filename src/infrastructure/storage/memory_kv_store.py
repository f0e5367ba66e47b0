"""In-memory key/value store."""


class InMemoryKeyValueStore:
    """Dict-backed IKeyValueStore for tests and throwaway sessions."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def close(self) -> None:
        return

    def __contains__(self, key: object) -> bool:
        return key in self._data
