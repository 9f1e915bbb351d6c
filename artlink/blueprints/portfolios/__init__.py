from flask import Blueprint

portfolios_bp = Blueprint("portfolios", __name__)

from . import routes  # noqa: E402,F401
