from registry.stores.interfaces import KeyValueStore
from registry.stores.memory_store import InMemoryStore

__all__ = ["KeyValueStore", "InMemoryStore"]
