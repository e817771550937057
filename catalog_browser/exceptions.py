class CatalogBrowserError(Exception):
    """Base class for browser-side errors."""


class NetworkError(CatalogBrowserError):
    """Raised when a request to the catalog API fails or returns garbage."""

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.status_code = status_code


class NotFoundError(CatalogBrowserError):
    """Raised when the API reports that a game id does not exist."""

    def __init__(self, game_id):
        super().__init__(f"Game {game_id} not found")
        self.game_id = game_id


class MissingCriteria(CatalogBrowserError):
    """Raised when a search is requested without any usable criteria."""
