from flask import Blueprint

videogame_bp = Blueprint("videogame", __name__)
