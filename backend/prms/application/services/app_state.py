"""Application state — the session and domain stores wired together."""

import logging
from dataclasses import dataclass

from prms.application.interfaces import IdGenerator, KeyValueStore
from prms.application.services.access_control import resolve_actor
from prms.application.services.domain_store import DomainStore
from prms.application.services.session_store import SessionStore
from prms.config import Settings
from prms.domain.entities import Actor, UserRole

logger = logging.getLogger(__name__)


def credentials_from_settings(settings: Settings) -> dict[str, tuple[str, UserRole]]:
    return {
        settings.admin_username: (settings.admin_password, UserRole.ADMIN),
        settings.employee_username: (settings.employee_password, UserRole.EMPLOYEE),
    }


@dataclass
class ApplicationState:
    """Everything the UI needs, constructed once at startup.

    The domain store is never persisted; only the session is restored.
    """

    session: SessionStore
    store: DomainStore

    @classmethod
    def load_from_persistence(
        cls,
        storage: KeyValueStore,
        settings: Settings,
        id_generator: IdGenerator | None = None,
    ) -> "ApplicationState":
        session = SessionStore(storage, credentials_from_settings(settings))
        store = DomainStore(
            id_generator=id_generator,
            performer=lambda: session.performer,
            max_notifications=settings.max_notifications,
        )
        logger.info(
            "Application state loaded (authenticated=%s)", session.is_authenticated
        )
        return cls(session=session, store=store)

    def current_actor(self) -> Actor | None:
        if not self.session.is_authenticated:
            return None
        return resolve_actor(self.session.role, self.session.username, self.store.employees)

    def clear(self) -> None:
        """Sign out and empty every collection."""
        self.session.clear()
        self.store.reset()
