from .session_store import SessionStore
from .domain_store import DomainStore, StoreSnapshot, StoreStats
from .app_state import ApplicationState

__all__ = [
    "SessionStore",
    "DomainStore",
    "StoreSnapshot",
    "StoreStats",
    "ApplicationState",
]
