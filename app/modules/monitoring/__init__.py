from flask import Blueprint

monitoring_bp = Blueprint("monitoring", __name__)
