from flask import jsonify, current_app
from flask_babel import gettext as _
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException
from ...extensions import db
from ...services.errors import ServiceError, InternalFailure
from . import errors_bp


def _rollback():
    # if a DB action caused this, rollback so the session isn't stuck in a bad transaction
    try:
        db.session.rollback()
    except SQLAlchemyError:
        current_app.logger.exception("Session rollback failed")


def _render(e: ServiceError):
    if e.status_code >= 500:
        # Don't leak internals, just a generic 500
        return jsonify({"error": _("Internal server error")}), e.status_code
    return jsonify({"error": e.message}), e.status_code


# Forbidden / NotFound / ValidationFailure / Conflict raised by services
@errors_bp.app_errorhandler(ServiceError)
def err_service(e: ServiceError):
    _rollback()
    if e.status_code >= 500:
        current_app.logger.error("Service failure: %s", e.message)
    return _render(e)

# Unexpected persistence error
@errors_bp.app_errorhandler(SQLAlchemyError)
def err_db(e):
    _rollback()
    current_app.logger.exception("Database error: %s", e)
    return _render(InternalFailure(str(e)))

# 401 / 404 / 405 / 413 ... raised by Flask itself
@errors_bp.app_errorhandler(HTTPException)
def err_http(e: HTTPException):
    if e.code and e.code >= 500:
        _rollback()
    return jsonify({"error": e.description or e.name}), e.code

# Last-resort: any other Exception
@errors_bp.app_errorhandler(Exception)
def err_unexpected(e):
    _rollback()
    current_app.logger.exception("Unhandled error: %s", e)
    return _render(InternalFailure())
