from .key_value_store import KeyValueStore
from .id_generator import IdGenerator, MonotonicIdGenerator

__all__ = [
    "KeyValueStore",
    "IdGenerator",
    "MonotonicIdGenerator",
]
