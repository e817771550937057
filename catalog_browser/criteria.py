from dataclasses import dataclass, fields, replace
from typing import Dict, Iterable

from catalog_browser.models import GameRecord

FIELDS = ("title", "developer", "publisher", "genre", "platform")


@dataclass(frozen=True)
class SearchCriteria:
    title: str = ""
    developer: str = ""
    publisher: str = ""
    genre: str = ""
    platform: str = ""

    def with_field(self, field: str, value: str) -> "SearchCriteria":
        if field not in FIELDS:
            raise ValueError(f"Unknown search field: {field}")
        return replace(self, **{field: value or ""})

    def active(self) -> Dict[str, str]:
        """Fields carrying a usable value, in API parameter form."""
        return {f.name: getattr(self, f.name) for f in fields(self) if getattr(self, f.name).strip()}

    def is_empty(self) -> bool:
        return not self.active()

    def matches(self, record: GameRecord) -> bool:
        # Same rule as the service: case-insensitive substring, AND across fields
        for field, value in self.active().items():
            if value.lower() not in (getattr(record, field) or "").lower():
                return False
        return True

    def filter(self, records: Iterable[GameRecord]) -> tuple:
        return tuple(record for record in records if self.matches(record))
