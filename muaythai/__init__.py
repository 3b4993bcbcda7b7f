import logging
import os
import sys
import uuid
from logging.handlers import RotatingFileHandler

from flask import Flask

from muaythai.config import config
from muaythai.errors import error_response, register_error_handlers
from muaythai.extensions import cors, db, jwt, limiter, ma, migrate


def configure_logging(app):
    level = getattr(logging, str(app.config.get("LOG_LEVEL", "INFO")).upper(), logging.INFO)
    formatter = logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")

    root = logging.getLogger("muaythai")
    root.setLevel(level)
    if not root.handlers:
        stream_handler = logging.StreamHandler(sys.stdout)
        stream_handler.setFormatter(formatter)
        root.addHandler(stream_handler)

        log_file = app.config.get("LOG_FILE")
        if log_file:
            os.makedirs(os.path.dirname(log_file) or ".", exist_ok=True)
            file_handler = RotatingFileHandler(log_file, maxBytes=5 * 1024 * 1024, backupCount=5)
            file_handler.setFormatter(formatter)
            root.addHandler(file_handler)
    app.logger.setLevel(level)


def check_production_settings(app):
    secret = app.config.get("JWT_SECRET_KEY") or ""
    if len(secret) < app.config["JWT_SECRET_MIN_LENGTH"]:
        raise RuntimeError("JWT_SECRET_KEY must be set and at least 32 characters long")
    if not app.config.get("SQLALCHEMY_DATABASE_URI"):
        raise RuntimeError("DATABASE_URL must be set in production")
    if not app.config.get("SECRET_KEY"):
        raise RuntimeError("SECRET_KEY must be set in production")


def register_jwt_callbacks():
    from muaythai.models import AdminUser
    from muaythai.services.auth import is_token_revoked

    @jwt.user_lookup_loader
    def user_lookup_callback(_jwt_header, jwt_data):
        try:
            return db.session.get(AdminUser, uuid.UUID(jwt_data["sub"]))
        except (ValueError, TypeError):
            return None

    @jwt.token_in_blocklist_loader
    def token_revoked_check(_jwt_header, jwt_payload):
        return is_token_revoked(jwt_payload)

    @jwt.expired_token_loader
    def expired_token_callback(_jwt_header, _jwt_payload):
        return error_response("Token has expired", 401)

    @jwt.invalid_token_loader
    def invalid_token_callback(reason):
        return error_response("Invalid token", 401, {"reason": reason})

    @jwt.unauthorized_loader
    def unauthorized_callback(reason):
        return error_response("Access token required", 401, {"reason": reason})

    @jwt.revoked_token_loader
    def revoked_token_callback(_jwt_header, _jwt_payload):
        return error_response("Token has been revoked", 401)

    @jwt.user_lookup_error_loader
    def user_lookup_error_callback(_jwt_header, _jwt_payload):
        return error_response("User not found or inactive", 401)

    @jwt.needs_fresh_token_loader
    def needs_fresh_token_callback(_jwt_header, _jwt_payload):
        return error_response("Fresh token required", 401)


def create_app(config_name=None):
    config_name = config_name or os.getenv("FLASK_CONFIG", "default")
    settings = config[config_name] if isinstance(config_name, str) else config_name
    app = Flask(__name__)
    app.config.from_object(settings)

    configure_logging(app)
    if not app.debug and not app.testing:
        check_production_settings(app)

    db.init_app(app)
    ma.init_app(app)
    jwt.init_app(app)
    migrate.init_app(app, db)
    limiter.init_app(app)
    cors.init_app(app, resources={r"/api/*": {
        "origins": app.config["CORS_ORIGINS"],
        "allow_headers": ["Content-Type", "Authorization"],
        "methods": ["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        "supports_credentials": True,
    }})

    register_jwt_callbacks()
    register_error_handlers(app)

    @app.after_request
    def apply_security_headers(response):
        for header, value in app.config.get("SECURITY_HEADERS", {}).items():
            response.headers.setdefault(header, value)
        return response

    from muaythai.routes.admin_users import admin_users_bp
    from muaythai.routes.classes import classes_bp
    from muaythai.routes.dashboard import dashboard_bp
    from muaythai.routes.gyms import gyms_bp
    from muaythai.routes.health import health_bp
    from muaythai.routes.provinces import provinces_bp
    from muaythai.routes.selection import selection_bp
    from muaythai.routes.tags import tags_bp
    from muaythai.routes.trainers import trainers_bp

    app.register_blueprint(health_bp)
    app.register_blueprint(provinces_bp, url_prefix="/api")
    app.register_blueprint(gyms_bp, url_prefix="/api")
    app.register_blueprint(trainers_bp, url_prefix="/api")
    app.register_blueprint(selection_bp, url_prefix="/api")
    app.register_blueprint(tags_bp, url_prefix="/api")
    app.register_blueprint(classes_bp, url_prefix="/api")
    app.register_blueprint(dashboard_bp, url_prefix="/api")
    app.register_blueprint(admin_users_bp, url_prefix="/api")

    from muaythai.commands import register_commands
    register_commands(app)

    app.logger.info("MyMuayThai API configured (%s)", settings.__name__)
    return app
