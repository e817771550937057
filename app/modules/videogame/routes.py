import logging

from flask import current_app, jsonify, request, send_from_directory

from app.modules.videogame import videogame_bp
from app.modules.videogame.services import VideoGameService
from core.storage.storage_service import ArtworkStorage

logger = logging.getLogger(__name__)

videogame_service = VideoGameService()


@videogame_bp.route("/videogames", methods=["GET"])
def list_videogames():
    games = videogame_service.search(request.args)
    return jsonify([game.to_dict() for game in games])


@videogame_bp.route("/videogames/<int:game_id>", methods=["GET"])
def get_videogame(game_id):
    game = videogame_service.get(game_id)
    return jsonify(game.to_dict())


@videogame_bp.route("/videogames/<int:game_id>/artwork", methods=["GET"])
def get_videogame_artwork(game_id):
    artwork_url = videogame_service.get_artwork_url(game_id)
    return jsonify({"artworkUrl": artwork_url})


@videogame_bp.route("/game-images/<path:filename>", methods=["GET"])
def game_image(filename):
    storage = ArtworkStorage(current_app.config["ARTWORK_FOLDER"])
    return send_from_directory(storage.root, filename)
