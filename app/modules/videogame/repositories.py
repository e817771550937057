from typing import List, Mapping, Optional

from app.modules.videogame.models import VideoGame
from core.repositories.BaseRepository import BaseRepository

FILTER_FIELDS = ("title", "developer", "publisher", "genre", "platform")

LIKE_ESCAPE = "!"


def like_pattern(value: str) -> str:
    """Wrap ``value`` for a substring LIKE, matching ``%`` and ``_`` literally."""
    escaped = (
        value.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )
    return f"%{escaped}%"


class VideoGameRepository(BaseRepository[VideoGame]):
    def __init__(self):
        super().__init__(VideoGame)

    def filter(self, criteria: Optional[Mapping[str, str]] = None) -> List[VideoGame]:
        criteria = criteria or {}
        q = self.model.query

        # One bound ILIKE per active field, joined with AND
        for field in FILTER_FIELDS:
            value = criteria.get(field)
            if not value or not value.strip():
                continue
            column = getattr(self.model, field)
            q = q.filter(column.ilike(like_pattern(value), escape=LIKE_ESCAPE))

        return q.order_by(self.model.id.asc()).all()

    def artwork_url(self, game_id: int) -> Optional[tuple]:
        return self.session.query(self.model.artwork_url).filter(self.model.id == game_id).first()

    def find_by_title(self, title: str) -> Optional[VideoGame]:
        return self.model.query.filter_by(title=title).first()

    def find_by_title_and_platform(self, title: str, platform: Optional[str]) -> Optional[VideoGame]:
        return self.model.query.filter_by(title=title, platform=platform).first()
