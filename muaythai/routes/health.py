# muaythai/routes/health.py
import os
import platform
import time
from datetime import datetime, timezone

from flask import Blueprint, current_app, jsonify
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from muaythai.extensions import db, limiter

health_bp = Blueprint("health", __name__)

STARTED_AT = time.time()


def _now():
    return datetime.now(timezone.utc).isoformat()


def _uptime():
    return round(time.time() - STARTED_AT, 2)


@health_bp.route("/health", methods=["GET"])
@limiter.exempt
def health():
    return jsonify({
        "status": "ok",
        "timestamp": _now(),
        "uptime": _uptime(),
        "version": current_app.config["API_VERSION"],
    })


@health_bp.route("/health/liveness", methods=["GET"])
@limiter.exempt
def liveness():
    return jsonify({"status": "alive", "timestamp": _now()})


@health_bp.route("/health/readiness", methods=["GET"])
@limiter.exempt
def readiness():
    try:
        db.session.execute(text("SELECT 1"))
    except SQLAlchemyError:
        current_app.logger.exception("Readiness check failed")
        db.session.rollback()
        return jsonify({"status": "not ready", "database": "disconnected", "timestamp": _now()}), 503
    return jsonify({"status": "ready", "database": "connected", "timestamp": _now()})


@health_bp.route("/health/metrics", methods=["GET"])
@limiter.exempt
def metrics():
    return jsonify({
        "timestamp": _now(),
        "uptime": _uptime(),
        "pid": os.getpid(),
        "python": platform.python_version(),
        "platform": platform.platform(),
    })
