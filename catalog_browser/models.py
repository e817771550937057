from dataclasses import dataclass
from datetime import date
from typing import Any, Mapping, Optional


def parse_release_date(value) -> Optional[date]:
    if value is None or value == "":
        return None
    if isinstance(value, date):
        return value
    # MySQL drivers serialize DATE columns as full timestamps
    text = str(value)[:10]
    try:
        return date.fromisoformat(text)
    except ValueError:
        return None


@dataclass(frozen=True)
class GameRecord:
    id: int
    title: str
    developer: str = ""
    publisher: str = ""
    genre: str = ""
    platform: str = ""
    release_date: Optional[date] = None
    artwork_url: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "GameRecord":
        return cls(
            id=data["id"],
            title=data.get("title") or "",
            developer=data.get("developer") or "",
            publisher=data.get("publisher") or "",
            genre=data.get("genre") or "",
            platform=data.get("platform") or "",
            release_date=parse_release_date(data.get("release_date")),
            artwork_url=data.get("artwork_url") or "",
        )

    def display_date(self) -> str:
        return self.release_date.isoformat() if self.release_date else ""
