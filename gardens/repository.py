# gardens/repository.py
from __future__ import annotations
from contextlib import contextmanager
from typing import Any, Callable, Iterable, Iterator, Mapping, Optional

from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from gardens import crud, models, schemas
from gardens.db import Base, ensure_sqlite_dir, make_engine, make_sessionmaker
from gardens.exceptions import StorageError
from gardens.logs import get_logger

logger = get_logger(__name__)

Payload = schemas.GardenIn | Mapping[str, Any]


def _as_payload(data: Payload | None) -> schemas.GardenIn:
    if isinstance(data, schemas.GardenIn):
        return data
    return schemas.GardenIn.model_validate(dict(data or {}))


class GardenRepository:
    """
    Sole data-access surface over the `gardens` table.

    Owns one engine for its lifetime. Every operation runs in its own
    short-lived session; storage failures are logged and raised as
    StorageError, while "not found" is reported as None or a zero count.
    """

    def __init__(self, engine: Engine):
        self._engine = engine
        self._sessions = make_sessionmaker(engine)

    @classmethod
    def from_url(cls, database_url: str) -> "GardenRepository":
        ensure_sqlite_dir(database_url)
        return cls(make_engine(database_url))

    @property
    def engine(self) -> Engine:
        return self._engine

    @contextmanager
    def _session(self, operation: str) -> Iterator[Session]:
        db = self._sessions()
        try:
            yield db
        except (SQLAlchemyError, OverflowError) as e:
            # sqlite3 raises a bare OverflowError for out-of-range INTEGER binds
            db.rollback()
            logger.error("Database error in %s: %s", operation, e)
            raise StorageError(operation, str(e)) from e
        finally:
            db.close()

    def _run(self, operation: str, fn: Callable[[Session], Any]) -> Any:
        with self._session(operation) as db:
            return fn(db)

    # ---------- schema ----------

    def init_schema(self) -> None:
        """CREATE TABLE IF NOT EXISTS for `gardens`; existing rows are untouched."""
        try:
            Base.metadata.create_all(bind=self._engine)
        except SQLAlchemyError as e:
            logger.error("Error creating/checking table: %s", e)
            raise StorageError("init_schema", str(e)) from e
        logger.info("Gardens table verified")

    def dispose(self) -> None:
        self._engine.dispose()

    # ---------- operations ----------

    def get_all(self) -> list[models.Garden]:
        rows = self._run("get_all", crud.list_gardens)
        logger.debug("Query returned %d gardens", len(rows))
        return rows

    def get_by_id(self, garden_id: int) -> Optional[models.Garden]:
        return self._run("get_by_id", lambda db: crud.get_garden(db, garden_id))

    def create(self, data: Payload | None = None) -> Optional[models.Garden]:
        payload = _as_payload(data)
        return self._run("create", lambda db: crud.create_garden(db, payload))

    def update(self, garden_id: int, data: Payload | None = None) -> Optional[models.Garden]:
        payload = _as_payload(data)
        return self._run("update", lambda db: crud.update_garden(db, garden_id, payload))

    def delete(self, garden_id: int) -> int:
        return self._run("delete", lambda db: crud.delete_garden(db, garden_id))

    def count(self) -> int:
        return self._run("count", crud.count_gardens)

    def bulk_insert(self, rows: Iterable[dict]) -> int:
        """Insert rows one by one; failed rows are logged and skipped. Returns the number stored."""
        inserted, failures = self._run("bulk_insert", lambda db: crud.bulk_insert_gardens(db, rows))
        for index, error in failures:
            logger.error("Database error in bulk_insert (row %d): %s", index, error)
        return inserted
