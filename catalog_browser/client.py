import logging
from typing import List, Mapping, Optional

import requests

from catalog_browser.criteria import SearchCriteria
from catalog_browser.exceptions import MissingCriteria, NetworkError, NotFoundError
from catalog_browser.models import GameRecord
from core.configuration.configuration import api_base_url, request_timeout

logger = logging.getLogger(__name__)


class CatalogClient:
    """Thin HTTP client for the ``/videogames`` API."""

    def __init__(self, base_url: Optional[str] = None, timeout: Optional[float] = None, session=None):
        self.base_url = (base_url or api_base_url()).rstrip("/")
        self.timeout = timeout if timeout is not None else request_timeout()
        self.session = session or requests.Session()
        self.session.headers.update({"Accept": "application/json"})

    def _get(self, path: str, params: Optional[Mapping[str, str]] = None, game_id=None):
        url = f"{self.base_url}{path}"
        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
        except requests.RequestException as exc:
            logger.error("Error fetching %s: %s", url, exc)
            raise NetworkError(f"Could not reach the catalog: {exc}") from exc

        if response.status_code == 404 and game_id is not None:
            raise NotFoundError(game_id)
        if not response.ok:
            logger.error("HTTP error %s from %s", response.status_code, url)
            raise NetworkError(f"HTTP error! status: {response.status_code}", status_code=response.status_code)

        try:
            return response.json()
        except ValueError as exc:
            raise NetworkError(f"Unexpected response from {url}") from exc

    def _records(self, payload) -> List[GameRecord]:
        if not isinstance(payload, list):
            logger.error("Unexpected data format: %r", payload)
            raise NetworkError("Unexpected data format from the catalog")
        try:
            return [GameRecord.from_dict(item) for item in payload]
        except (KeyError, TypeError) as exc:
            raise NetworkError("Malformed game record in response") from exc

    def fetch_catalog(self) -> List[GameRecord]:
        return self._records(self._get("/videogames"))

    def search(self, criteria: SearchCriteria) -> List[GameRecord]:
        params = criteria.active()
        if not params:
            raise MissingCriteria("At least one search field is required")
        logger.debug("Searching catalog with %s", params)
        return self._records(self._get("/videogames", params=params))

    def get(self, game_id: int) -> GameRecord:
        payload = self._get(f"/videogames/{game_id}", game_id=game_id)
        if not isinstance(payload, dict) or "id" not in payload:
            raise NotFoundError(game_id)
        return GameRecord.from_dict(payload)

    def artwork(self, game_id: int) -> Optional[str]:
        payload = self._get(f"/videogames/{game_id}/artwork", game_id=game_id)
        return payload.get("artworkUrl") if isinstance(payload, dict) else None
