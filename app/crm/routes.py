from flask import Blueprint, render_template

bp = Blueprint("routes", __name__)


@bp.get("/")
def index():
    """Single-page client bound to the customers API on this host."""
    return render_template("public/index.html")


@bp.get("/teste")
def teste():
    """Health check kept for existing clients. Returns JSON."""
    return {"ok": True}


@bp.get("/health")
def health():
    """Health check endpoint. Returns JSON."""
    return {"ok": True}


@bp.get("/healthz")
def healthz():
    """
    Fast health check for probes. No store access, minimal overhead.
    """
    return "ok", 200
