"""In-memory implementation of the KeyValueStore."""

from registry.stores.interfaces import KeyValueStore, V


class InMemoryStore(KeyValueStore[V]):
    """Dict-backed store. Records live for the lifetime of the process."""

    def __init__(self) -> None:
        self._records: dict[str, V] = {}

    def get(self, key: str) -> V | None:
        return self._records.get(key)

    def insert(self, key: str, value: V) -> None:
        self._records[key] = value

    def remove(self, key: str) -> None:
        self._records.pop(key, None)

    def values(self) -> list[V]:
        return [self._records[key] for key in sorted(self._records)]

    def contains(self, key: str) -> bool:
        return key in self._records

    def __len__(self) -> int:
        return len(self._records)
