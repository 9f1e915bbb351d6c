import os
from pathlib import Path
import logging
from logging.handlers import RotatingFileHandler
from flask import Flask, jsonify, request, has_request_context
from .extensions import db, migrate, login_manager, mail, babel
from .config import Config
from .models.user import User
from . import security  # noqa: F401  registers the Flask-Login request loader
from .commands import register_commands

# Blueprints
from .blueprints.errors import errors_bp
from .blueprints.auth import auth_bp
from .blueprints.commissions import commissions_bp
from .blueprints.portfolios import portfolios_bp
from .blueprints.projects import projects_bp
from .blueprints.applications import applications_bp
from .blueprints.availability import availability_bp


LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"


def _init_sentry(app):
    """Error reporting, only when a DSN is configured."""
    if not app.config.get("SENTRY_DSN"):
        return
    import sentry_sdk
    from sentry_sdk.integrations.flask import FlaskIntegration
    from sentry_sdk.integrations.sqlalchemy import SqlalchemyIntegration

    env = os.getenv("ENV", "development")

    sentry_sdk.init(
        dsn=app.config["SENTRY_DSN"],
        integrations=[FlaskIntegration(), SqlalchemyIntegration()],
        traces_sample_rate=app.config.get("SENTRY_TRACES_SAMPLE_RATE", 0.0),
        environment=env,
        release=app.config.get("APP_VERSION"),
        send_default_pii=False,
    )
    app.logger.info("Sentry reporting for %s", env)


def _log_formatter(app):
    if app.config.get("LOG_JSON", False):
        import json_log_formatter
        return json_log_formatter.JSONFormatter()
    return logging.Formatter(LOG_FORMAT)


def _log_handlers(app):
    if app.config.get("LOG_TO_FILE", True):
        log_dir = Path(app.config.get("LOG_DIR", "logs"))
        log_dir.mkdir(parents=True, exist_ok=True)
        yield RotatingFileHandler(
            log_dir / app.config.get("LOG_FILENAME", "artlink.log"),
            maxBytes=5_000_000, backupCount=5, encoding="utf-8",
        )
    yield logging.StreamHandler()


def _init_logging(app):
    """Attach handlers to app.logger ("artlink"); service loggers propagate into it."""
    level = getattr(logging, str(app.config.get("LOG_LEVEL", "INFO")).upper(), logging.INFO)
    app.logger.setLevel(level)

    # tests build many apps in one process
    for stale in [h for h in app.logger.handlers if getattr(h, "_artlink", False)]:
        app.logger.removeHandler(stale)
        stale.close()

    formatter = _log_formatter(app)
    for handler in _log_handlers(app):
        handler.setLevel(level)
        handler.setFormatter(formatter)
        handler._artlink = True
        app.logger.addHandler(handler)

    app.logger.debug("Logging at %s", logging.getLevelName(level))


def create_app(config_object=None):
    app = Flask(__name__, instance_relative_config=True)
    app.config.from_object(config_object or Config)
    app.json.sort_keys = app.config.get("JSON_SORT_KEYS", False)

    # Extensions
    db.init_app(app)
    migrate.init_app(app, db)
    login_manager.init_app(app)
    mail.init_app(app)

    # ---- Babel init (locale from Accept-Language) ----
    def _select_locale():
        if not has_request_context():
            return app.config.get("BABEL_DEFAULT_LOCALE", "en")
        return request.accept_languages.best_match(app.config.get("LANGUAGES", ["en"])) or "en"
    babel.init_app(app, locale_selector=_select_locale)

    @login_manager.user_loader
    def load_user(user_id):
        return db.session.get(User, int(user_id))

    # Logging must come before blueprints so errors during register are captured
    _init_logging(app)
    _init_sentry(app)

    # Blueprints
    app.register_blueprint(errors_bp)  # error handlers
    app.register_blueprint(auth_bp, url_prefix="/auth")
    app.register_blueprint(commissions_bp, url_prefix="/commissions")
    app.register_blueprint(portfolios_bp, url_prefix="/portfolios")
    app.register_blueprint(projects_bp, url_prefix="/projects")
    app.register_blueprint(applications_bp, url_prefix="/applications")
    app.register_blueprint(availability_bp, url_prefix="/availability-posts")

    register_commands(app)

    @app.route("/health")
    def health():
        return jsonify({"status": "ok", "version": app.config.get("APP_VERSION")})

    return app
