from flask import Blueprint

public_bp = Blueprint("public", __name__)
