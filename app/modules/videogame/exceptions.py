"""
Exception hierarchy for the video game catalog service.

All catalog errors derive from VideoGameError so the HTTP layer can map them
to responses in one place.
"""


class VideoGameError(Exception):
    """Base class for catalog service errors."""


class VideoGameNotFound(VideoGameError):
    """Raised when no record exists for the requested id."""

    def __init__(self, game_id):
        super().__init__(f"Video game {game_id} not found")
        self.game_id = game_id


class CatalogStoreError(VideoGameError):
    """Raised when the underlying store fails to answer a query."""
