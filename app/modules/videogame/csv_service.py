from __future__ import annotations

import csv
import logging
import os
from datetime import date
from typing import Dict, List, Optional

from app.modules.videogame.repositories import VideoGameRepository
from catalog_browser.artwork import is_absolute
from core.storage.storage_service import ArtworkStorage

logger = logging.getLogger(__name__)


class VideoGameCSVService:
    REQUIRED_HEADERS: List[str] = [
        "title",
        "developer",
        "publisher",
        "genre",
        "platform",
        "release_date",
        "artwork_url",
    ]

    def __init__(self, storage: Optional[ArtworkStorage] = None):
        self.repository = VideoGameRepository()
        self.storage = storage or ArtworkStorage()

    def read_rows(self, csv_path: str) -> List[Dict[str, object]]:
        """Parse and validate a catalog CSV. Raises ValueError listing every bad row."""
        try:
            with open(csv_path, "r", encoding="utf-8", newline="") as f:
                reader = csv.reader(f)
                headers = [h.strip() for h in next(reader, [])]
                raw_rows = list(reader)
        except OSError as exc:
            raise ValueError(f"{csv_path}: cannot read CSV ({exc})") from exc

        if headers != self.REQUIRED_HEADERS:
            raise ValueError(
                f"{os.path.basename(csv_path)}: invalid headers. Expected exactly: "
                f"{', '.join(self.REQUIRED_HEADERS)} in this order"
            )

        errors: List[str] = []
        rows: List[Dict[str, object]] = []
        for i, raw in enumerate(raw_rows, start=2):
            if not any(cell.strip() for cell in raw):
                continue
            if len(raw) != len(self.REQUIRED_HEADERS):
                errors.append(f"row {i} does not match header column count")
                continue
            row = dict(zip(self.REQUIRED_HEADERS, (cell.strip() for cell in raw)))
            if not row["title"]:
                errors.append(f"row {i}: title is required")
                continue
            try:
                row["release_date"] = date.fromisoformat(row["release_date"]) if row["release_date"] else None
            except ValueError:
                errors.append(f"row {i}: release_date must be YYYY-MM-DD, got '{row['release_date']}'")
                continue
            rows.append(row)

        if errors:
            raise ValueError("; ".join(errors))
        if not rows:
            raise ValueError(f"{os.path.basename(csv_path)}: must contain at least one data row")
        return rows

    def _store_artwork(self, artwork_url: str, artwork_dir: Optional[str]) -> str:
        if not artwork_url or is_absolute(artwork_url) or not artwork_dir:
            return artwork_url
        src_path = os.path.join(artwork_dir, artwork_url)
        if not os.path.isfile(src_path):
            if self.storage.exists(artwork_url):
                return artwork_url
            raise ValueError(f"Artwork file not found: {src_path}")
        return self.storage.save_artwork(src_path, artwork_url)

    def import_rows(self, rows: List[Dict[str, object]], artwork_dir: Optional[str] = None) -> int:
        """Insert rows that are not in the catalog yet (same title and platform)."""
        created = 0
        session = self.repository.session
        try:
            for row in rows:
                exists = self.repository.find_by_title_and_platform(row["title"], row["platform"] or None)
                if exists:
                    logger.info("Skipping %s (%s): already in the catalog", row["title"], row["platform"])
                    continue
                artwork_url = self._store_artwork(row["artwork_url"], artwork_dir)
                self.repository.create(
                    commit=False,
                    title=row["title"],
                    developer=row["developer"] or None,
                    publisher=row["publisher"] or None,
                    genre=row["genre"] or None,
                    platform=row["platform"] or None,
                    release_date=row["release_date"],
                    artwork_url=artwork_url or None,
                )
                created += 1
            session.commit()
        except Exception:
            logger.exception("Error importing video games")
            session.rollback()
            raise
        return created

    def import_file(self, csv_path: str, artwork_dir: Optional[str] = None) -> int:
        return self.import_rows(self.read_rows(csv_path), artwork_dir=artwork_dir)
