from flask import Blueprint

commissions_bp = Blueprint("commissions", __name__)

from . import routes  # noqa: E402,F401
