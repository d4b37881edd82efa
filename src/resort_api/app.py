"""
Factory for the Resort POS API service (REST).

Store handles are built once here and handed to every service; tests pass
their own in-memory stores instead.
"""

from __future__ import annotations

import time

from flask import Flask, jsonify, request
from flask_cors import CORS

from resort_api.extensions import init_services
from resort_api.routes.api import api_bp
from resort_shared.config import AppConfig, load_config, validate_required_env_vars
from resort_shared.datetime_utils import now_iso
from resort_shared.error_handlers import register_error_handlers
from resort_shared.logging_config import configure_logging, get_logger
from resort_shared.serializers import success_response
from resort_shared.services import build_services, provision
from resort_shared.store import DocumentStore, ObjectStore, build_stores

logger = get_logger(__name__)

SERVICE_NAME = "Jam Jam Resort API"


def create_app(
    config: AppConfig | None = None,
    store: DocumentStore | None = None,
    object_store: ObjectStore | None = None,
) -> Flask:
    if config is None:
        # Validate environment variables (fail-fast)
        validate_required_env_vars()
        config = load_config("resort-api")

    configure_logging(config.app_name, config.log_level)

    app = Flask(__name__)
    app.config["APP_NAME"] = SERVICE_NAME
    app.config["DEBUG"] = config.debug_mode
    started_at = time.monotonic()

    if store is None or object_store is None:
        default_store, default_object_store = build_stores(config)
        store = store or default_store
        object_store = object_store or default_object_store

    services = build_services(store, object_store, config)
    init_services(app, services, config)

    if config.auto_provision_tables:
        logger.info("Provisioning collections at startup")
        provision(services)

    @app.before_request
    def log_request():
        logger.info("Request", extra={"method": request.method, "path": request.path})

    # Register Blueprints with prefixes
    app.register_blueprint(api_bp, url_prefix="/api")

    # Error Handlers
    register_error_handlers(app)

    # CORS
    origins = "*" if config.cors_origins == ["*"] else config.cors_origins
    CORS(app, resources={r"/api/*": {"origins": origins}})

    @app.get("/")
    def index():
        return jsonify(
            success_response({"status": "ok", "service": SERVICE_NAME, "timestamp": now_iso()})
        ), 200

    @app.get("/api/health")
    def health():
        return jsonify(
            success_response(
                {"status": "healthy", "uptime": round(time.monotonic() - started_at, 3)}
            )
        ), 200

    return app
