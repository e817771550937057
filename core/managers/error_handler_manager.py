import logging

from flask import jsonify
from werkzeug.exceptions import HTTPException

from app.modules.videogame.exceptions import CatalogStoreError, VideoGameNotFound

logger = logging.getLogger(__name__)


class ErrorHandlerManager:
    def __init__(self, app):
        self.app = app

    def register_error_handlers(self):
        @self.app.errorhandler(VideoGameNotFound)
        def handle_game_not_found(e):
            logger.info("Game not found: %s", e.game_id)
            return jsonify({"message": "Game not found"}), 404

        @self.app.errorhandler(CatalogStoreError)
        def handle_store_error(e):
            logger.error("Database error: %s", e)
            return jsonify({"error": "Database error"}), 500

        @self.app.errorhandler(404)
        def handle_not_found(e):
            logger.warning("404 Not Found: %s", e)
            return jsonify({"message": "Not found"}), 404

        @self.app.errorhandler(500)
        def handle_internal_error(e):
            logger.error("500 Internal Server Error: %s", e)
            return jsonify({"error": "Internal server error"}), 500

        @self.app.errorhandler(HTTPException)
        def handle_http_exception(e):
            return jsonify({"error": e.description}), e.code
