from __future__ import annotations

import importlib
from datetime import timedelta
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, flash, redirect, url_for
from flask_wtf.csrf import CSRFProtect

from config import get_settings_module

from .auth.controller import register as register_auth
from .claims.controller import register as register_claims
from .container import Container, build_container
from .core.constants import DEFAULT_DOCUMENT_EXTENSIONS, DEFAULT_MAX_UPLOAD_MB, DEFAULT_SESSION_MINUTES
from .database.bootstrap import apply_schema, list_tables
from .logging_config import configure_logging


def create_app(container: Optional[Container] = None) -> Flask:
    """Build the Flask app.

    Tests pass a ready-made `container` (in-memory repositories); otherwise the
    MySQL-backed container is built from the active settings module.
    """
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["WTF_CSRF_ENABLED"] = bool(getattr(settings, "WTF_CSRF_ENABLED", True))
    app.config["MAX_UPLOAD_MB"] = int(getattr(settings, "MAX_UPLOAD_MB", DEFAULT_MAX_UPLOAD_MB))
    # a little headroom for the other form fields; DocumentStorage enforces the exact limit
    app.config["MAX_CONTENT_LENGTH"] = (app.config["MAX_UPLOAD_MB"] + 1) * 1024 * 1024
    app.permanent_session_lifetime = timedelta(minutes=int(getattr(settings, "SESSION_MINUTES", DEFAULT_SESSION_MINUTES)))

    logger = configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    logger.info("Starting with settings=%s", settings_module)

    if container is None:
        db_config = dict(getattr(settings, "DB_CONFIG"))
        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config)
            logger.info("Schema ready (tables=%d)", len(list_tables(db_config)))

        container = build_container(
            db_config=db_config,
            upload_root=Path(getattr(settings, "UPLOAD_FOLDER", "instance")),
            allowed_extensions=getattr(settings, "ALLOWED_DOCUMENT_EXTENSIONS", DEFAULT_DOCUMENT_EXTENSIONS),
            max_upload_mb=app.config["MAX_UPLOAD_MB"],
        )

    app.extensions["claim_system"] = container
    CSRFProtect(app)

    register_auth(app, container)
    register_claims(app, container)

    @app.errorhandler(413)
    def upload_too_large(_err):
        flash(f"File must be smaller than {app.config['MAX_UPLOAD_MB']} MB", "danger")
        return redirect(url_for("submit_claim"))

    return app
