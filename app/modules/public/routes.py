import logging
import os

from flask import abort, current_app, jsonify, send_from_directory

from app.modules.public import public_bp

logger = logging.getLogger(__name__)


def _frontend_dir():
    build_dir = current_app.config.get("FRONTEND_BUILD_DIR")
    if not current_app.config.get("SERVE_FRONTEND") or not build_dir or not os.path.isdir(build_dir):
        return None
    return build_dir


@public_bp.route("/", defaults={"path": ""})
@public_bp.route("/<path:path>")
def index(path):
    build_dir = _frontend_dir()
    if build_dir is None:
        if path:
            abort(404)
        logger.info("Access index")
        return jsonify({"status": "ok", "message": "Video Game Archive API"})

    # Known static files are served as-is, everything else falls back to the SPA entry point
    if path and os.path.isfile(os.path.join(build_dir, path)):
        return send_from_directory(build_dir, path)
    return send_from_directory(build_dir, "index.html")
