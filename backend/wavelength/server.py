from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

from flask import Flask, send_from_directory
from flask_cors import CORS
from flask_socketio import SocketIO
from werkzeug.middleware.proxy_fix import ProxyFix

from .config import Config
from .game.registry import REGISTRY_EXTENSION, RoomRegistry
from .game.rounds import target_range
from .routes.health import bp as health_bp
from .routes.rooms import bp as rooms_bp
from .routes.spectrums import bp as spectrums_bp
from .realtime.handlers import register_socketio_handlers


def _default_async_mode() -> str:
    env_async_mode = os.environ.get("SOCKETIO_ASYNC_MODE", "").strip()
    if env_async_mode:
        return env_async_mode
    # Default choice:
    # - Windows: threading (eventlet has known compatibility issues on newer Python)
    # - Python >= 3.13: threading (safer default)
    # - Otherwise: eventlet
    if sys.platform.startswith("win") or sys.version_info >= (3, 13):
        return "threading"
    return "eventlet"


def create_app(
    config_class: type = Config,
    registry: RoomRegistry | None = None,
) -> tuple[Flask, SocketIO]:
    dist_dir = Path(__file__).resolve().parents[2] / "frontend" / "dist"

    static_folder = str(dist_dir) if dist_dir.exists() else None
    static_url_path = "/" if dist_dir.exists() else None

    app = Flask(
        __name__,
        static_folder=static_folder,
        static_url_path=static_url_path,
    )
    app.config.from_object(config_class)

    log_level = app.config.get("LOG_LEVEL", "INFO")
    app.logger.setLevel(log_level)
    logging.getLogger("wavelength").setLevel(log_level)

    if app.config.get("TRUST_PROXY_HEADERS", False):
        app.wsgi_app = ProxyFix(app.wsgi_app, x_for=1, x_proto=1, x_host=1, x_port=1)

    cors_origins = app.config.get("CORS_ORIGINS", "*")
    CORS(app, resources={r"/api/*": {"origins": cors_origins}})

    async_mode = app.config.get("SOCKETIO_ASYNC_MODE") or _default_async_mode()

    socketio = SocketIO(
        app,
        cors_allowed_origins=cors_origins,
        async_mode=async_mode,
    )

    # Fail at startup rather than on the first room:create.
    min_target, max_target = target_range(
        app.config.get("MIN_TARGET_POSITION"), app.config.get("MAX_TARGET_POSITION")
    )

    if registry is None:
        registry = RoomRegistry()
    registry.min_target, registry.max_target = min_target, max_target
    app.extensions[REGISTRY_EXTENSION] = registry

    app.register_blueprint(health_bp, url_prefix="/api")
    app.register_blueprint(rooms_bp, url_prefix="/api")
    app.register_blueprint(spectrums_bp, url_prefix="/api")

    register_socketio_handlers(socketio, registry)

    if dist_dir.exists():
        @app.get("/")
        def index():
            return send_from_directory(dist_dir, "index.html")

        @app.get("/<path:path>")
        def static_proxy(path: str):
            file_path = dist_dir / path
            if file_path.exists() and file_path.is_file():
                return send_from_directory(dist_dir, path)
            return send_from_directory(dist_dir, "index.html")

    app.logger.info("wavelength app created (async_mode=%s)", async_mode)
    return app, socketio
