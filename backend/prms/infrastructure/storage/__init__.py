from .in_memory_key_value_store import InMemoryKeyValueStore
from .sqlalchemy_key_value_store import SQLAlchemyKeyValueStore

__all__ = [
    "InMemoryKeyValueStore",
    "SQLAlchemyKeyValueStore",
]
