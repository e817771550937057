import logging
from typing import Dict, List, Mapping, Optional

from sqlalchemy.exc import SQLAlchemyError

from app.modules.videogame.exceptions import CatalogStoreError, VideoGameNotFound
from app.modules.videogame.models import VideoGame
from app.modules.videogame.repositories import FILTER_FIELDS, VideoGameRepository
from core.services.BaseService import BaseService

logger = logging.getLogger(__name__)


def normalize_criteria(params: Optional[Mapping[str, str]]) -> Dict[str, str]:
    """
    Keep only the filterable fields that carry a usable value.

    Unknown keys are ignored and empty or whitespace-only values mean
    "no constraint" for that field.
    """
    if not params:
        return {}
    criteria = {}
    for field in FILTER_FIELDS:
        value = params.get(field)
        if value is not None and value.strip():
            criteria[field] = value
    return criteria


class VideoGameService(BaseService):
    def __init__(self):
        super().__init__(VideoGameRepository())

    def _store_failure(self, action: str, exc: SQLAlchemyError) -> CatalogStoreError:
        logger.exception("Database error during %s: %s", action, exc)
        try:
            self.repository.session.rollback()
        except SQLAlchemyError:
            logger.exception("Rollback failed after database error")
        return CatalogStoreError(f"Database error during {action}")

    def search(self, params: Optional[Mapping[str, str]] = None) -> List[VideoGame]:
        criteria = normalize_criteria(params)
        logger.info("Searching video games with criteria %s", criteria or "{} (full catalog)")
        try:
            return self.repository.filter(criteria)
        except SQLAlchemyError as exc:
            raise self._store_failure("search", exc) from exc

    def get(self, game_id: int) -> VideoGame:
        logger.info("Fetching game with ID: %s", game_id)
        try:
            game = self.repository.get_by_id(game_id)
        except SQLAlchemyError as exc:
            raise self._store_failure("get", exc) from exc
        if game is None:
            raise VideoGameNotFound(game_id)
        return game

    def get_artwork_url(self, game_id: int) -> Optional[str]:
        logger.info("Fetching artwork for game with ID: %s", game_id)
        try:
            row = self.repository.artwork_url(game_id)
        except SQLAlchemyError as exc:
            raise self._store_failure("artwork lookup", exc) from exc
        if row is None:
            raise VideoGameNotFound(game_id)
        return row[0]
