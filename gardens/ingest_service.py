# gardens/ingest_service.py
from __future__ import annotations
from pathlib import Path
from typing import Callable, Dict, Any
import json

from gardens.exceptions import StorageError
from gardens.ingest_sources import IngestSource, JsonFileSource
from gardens.logs import get_logger
from gardens.repository import GardenRepository

logger = get_logger(__name__)

SourceFactory = Callable[[Path], IngestSource]


class GardenSeedService:
    """Seeds an empty `gardens` table from a JSON document, at most once per fresh database."""

    def __init__(self, repository: GardenRepository, *, source_factory: SourceFactory | None = None):
        # DI
        self._repo = repository
        self._source_factory = source_factory or JsonFileSource

    @staticmethod
    def _skipped(reason: str) -> Dict[str, Any]:
        return {"imported": 0, "skipped": True, "reason": reason}

    def seed_if_empty(self, seed_path: Path | str) -> Dict[str, Any]:
        try:
            count = self._repo.count()
        except StorageError as e:
            logger.error("Error checking data: %s", e)
            return self._skipped("count_failed")
        logger.info("Found %d gardens in database", count)
        if count:
            return self._skipped("not_empty")
        logger.info("Database is empty. Importing from %s", seed_path)
        return self.ingest_file(seed_path)

    def ingest_file(self, seed_path: Path | str) -> Dict[str, Any]:
        path = Path(seed_path)
        if not path.exists():
            logger.info("No seed file found at: %s", path)
            return self._skipped("missing_file")
        try:
            source = self._source_factory(path)
        except (OSError, json.JSONDecodeError, ValueError) as e:
            logger.error("Error importing from JSON: %s", e)
            return self._skipped("unreadable")
        return self.ingest(source)

    def ingest(self, source: IngestSource) -> Dict[str, Any]:
        try:
            rows = list(source.records())
            logger.info("Found %d gardens in seed source", len(rows))
            imported = self._repo.bulk_insert(rows)
        except (StorageError, ValueError, TypeError, OverflowError) as e:
            logger.error("Error importing from JSON: %s", e)
            return {"imported": 0, "skipped": False, "reason": "failed"}
        logger.info("Successfully imported %d gardens from JSON", imported)
        return {"imported": imported, "skipped": False, "reason": None}
