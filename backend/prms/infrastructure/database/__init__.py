from .models import Base, KeyValueEntryModel
from .session import build_engine, build_session_factory

__all__ = [
    "Base",
    "KeyValueEntryModel",
    "build_engine",
    "build_session_factory",
]
