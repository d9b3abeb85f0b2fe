import logging
import uuid

from flask import Flask, g, jsonify, request
from dotenv import load_dotenv
from werkzeug.exceptions import HTTPException

from app.crm.config import load_config
from app.crm.constants import REQUEST_ID_HEADER, STORE_BACKEND_DATABASE
from app.crm.db import init_db, teardown_db_session
from app.crm.routes import bp as routes_bp
from app.crm.modules.customers.api import bp as customers_bp
from app.crm.modules.customers.service import CustomerError
from app.crm.modules.customers.store import init_store


def _configure_logging(level_name: str) -> None:
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger().setLevel(level)


def create_app() -> Flask:
    load_dotenv()
    app = Flask(__name__, template_folder="templates", static_folder="static")
    app.config.from_mapping(load_config())
    app.json.sort_keys = False

    _configure_logging(app.config["LOG_LEVEL"])

    # Production guardrails (fail fast with clear logs)
    env = (app.config.get("ENV") or "").strip().lower()
    uses_database = app.config["STORE_BACKEND"] == STORE_BACKEND_DATABASE
    if env in ("prod", "production"):
        if uses_database:
            if not app.config.get("DATABASE_URL") or str(app.config["DATABASE_URL"]).strip() == "":
                raise RuntimeError("DATABASE_URL is required in production.")
            if str(app.config["DATABASE_URL"]).startswith("sqlite"):
                raise RuntimeError("DATABASE_URL must be Postgres in production (not sqlite).")
        if not app.config.get("SECRET_KEY") or str(app.config["SECRET_KEY"]) in ("", "change-me"):
            raise RuntimeError("SECRET_KEY must be set to a strong value in production (not default).")

    if uses_database:
        init_db(app)
        app.teardown_appcontext(teardown_db_session)
    init_store(app)

    app.register_blueprint(routes_bp)
    app.register_blueprint(customers_bp)

    @app.before_request
    def _assign_request_id():
        rid = (request.headers.get(REQUEST_ID_HEADER) or "").strip()[:64]
        g.request_id = rid or uuid.uuid4().hex

    @app.after_request
    def _echo_request_id(response):
        rid = getattr(g, "request_id", None)
        if rid:
            response.headers[REQUEST_ID_HEADER] = rid
        return response

    @app.errorhandler(CustomerError)
    def _err_customer(e: CustomerError):
        return jsonify({"message": e.message}), 400

    @app.errorhandler(HTTPException)
    def _err_http(e: HTTPException):
        if e.code is not None and e.code < 400:
            # routing redirects (e.g. trailing slash) are responses, not errors
            return e
        return jsonify({"message": e.description or e.name}), e.code or 500

    @app.errorhandler(Exception)
    def _err_500(e: Exception):
        s = getattr(g, "db_session", None)
        if s is not None:
            s.rollback()
        app.logger.exception("Unhandled 500 (request_id=%s)", getattr(g, "request_id", None))
        return jsonify({"message": "Internal server error."}), 500

    logging.getLogger(__name__).info(
        "create_app() complete; store=%s env=%s", app.config["STORE_BACKEND"], env or "(unset)"
    )

    return app
