import logging
import time

from flask import g, jsonify, request

from app.modules.monitoring import monitoring_bp
from app.modules.monitoring.services import get_metrics

logger = logging.getLogger(__name__)


@monitoring_bp.before_app_request
def start_timer():
    g.request_started_at = time.perf_counter()


@monitoring_bp.after_app_request
def record_request(response):
    started = g.pop("request_started_at", None)
    if started is not None:
        elapsed_ms = (time.perf_counter() - started) * 1e3
        get_metrics().record(elapsed_ms)
        logger.debug("%s %s -> %s in %.2fms", request.method, request.path, response.status_code, elapsed_ms)
    return response


@monitoring_bp.route("/api/performance", methods=["GET"])
def performance():
    return jsonify(get_metrics().snapshot())
