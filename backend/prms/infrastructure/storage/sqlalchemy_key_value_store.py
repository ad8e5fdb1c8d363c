"""Concrete KeyValueStore backed by a SQLAlchemy table."""

import logging

from sqlalchemy import Engine, delete, select

from prms.application.interfaces import KeyValueStore
from prms.infrastructure.database import KeyValueEntryModel, build_session_factory

logger = logging.getLogger(__name__)


class SQLAlchemyKeyValueStore(KeyValueStore):
    """Implements the KeyValueStore port with one short transaction per call.

    Every ``set``/``remove`` commits before returning. Calls are synchronous
    and are made directly from the async endpoints; writes are single-row
    SQLite commits on a single-threaded app.
    """

    def __init__(self, engine: Engine):
        self._session_factory = build_session_factory(engine)

    def get(self, key: str) -> str | None:
        with self._session_factory() as session:
            entry = session.get(KeyValueEntryModel, key)
            return entry.value if entry else None

    def set(self, key: str, value: str) -> None:
        with self._session_factory.begin() as session:
            entry = session.get(KeyValueEntryModel, key)
            if entry is None:
                session.add(KeyValueEntryModel(key=key, value=value))
            else:
                entry.value = value
        logger.debug("Persisted key '%s'", key)

    def remove(self, key: str) -> None:
        with self._session_factory.begin() as session:
            session.execute(delete(KeyValueEntryModel).where(KeyValueEntryModel.key == key))
        logger.debug("Removed key '%s'", key)

    def keys(self) -> list[str]:
        with self._session_factory() as session:
            result = session.execute(select(KeyValueEntryModel.key))
            return list(result.scalars().all())
