from datetime import date
from typing import Iterable, Tuple

import unidecode

from catalog_browser.models import GameRecord

SORT_KEYS = ("title", "release_date")


def title_key(record: GameRecord) -> str:
    """Collation key: accents folded to ASCII, then case-folded."""
    return unidecode.unidecode(record.title or "").casefold()


def release_date_key(record: GameRecord) -> Tuple[bool, date]:
    # Undated records sort after every dated one
    return (record.release_date is None, record.release_date or date.min)


def sort_by_title(records: Iterable[GameRecord]) -> tuple:
    return tuple(sorted(records, key=title_key))


def sort_by_release_date(records: Iterable[GameRecord]) -> tuple:
    return tuple(sorted(records, key=release_date_key))


def sort_records(records: Iterable[GameRecord], key: str) -> tuple:
    if key == "title":
        return sort_by_title(records)
    if key == "release_date":
        return sort_by_release_date(records)
    raise ValueError(f"Unknown sort key: {key}")
