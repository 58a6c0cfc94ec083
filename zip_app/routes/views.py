"""
Plain-text routes.

Routes:
    GET  /hello/<name>  - Greeting
"""

from flask import Blueprint

views_bp = Blueprint("views", __name__)


@views_bp.route("/hello/<name>")
def hello(name: str) -> tuple[str, int, dict[str, str]]:
    """Greet the caller by name."""
    return f"Hello {name}!", 200, {"Content-Type": "text/plain; charset=utf-8"}
