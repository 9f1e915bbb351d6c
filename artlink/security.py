# artlink/security.py
from typing import Optional

from flask import current_app, request, jsonify
from flask_babel import gettext as _
from itsdangerous import URLSafeTimedSerializer, BadSignature, SignatureExpired

from .extensions import db, login_manager
from .models.user import User


# -----------------
# Bearer tokens
# -----------------

def _ts() -> URLSafeTimedSerializer:
    secret_key = current_app.config.get("SECRET_KEY")
    salt = current_app.config.get("AUTH_TOKEN_SALT", "api-auth")
    return URLSafeTimedSerializer(secret_key=secret_key, salt=salt)


def issue_token(user_id: int) -> str:
    return _ts().dumps({"uid": user_id})


def verify_token(token: str, max_age: Optional[int] = None) -> Optional[int]:
    if max_age is None:
        max_age = current_app.config.get("AUTH_TOKEN_MAX_AGE", 7 * 24 * 60 * 60)
    try:
        data = _ts().loads(token, max_age=max_age)
        return int(data.get("uid"))
    except (BadSignature, SignatureExpired, ValueError, TypeError, AttributeError):
        return None


def _bearer_token() -> Optional[str]:
    header = request.headers.get("Authorization", "")
    if not header.startswith("Bearer "):
        return None
    token = header.split(" ", 1)[1].strip()
    return token or None


# -----------------
# Flask-Login wiring
# -----------------

@login_manager.request_loader
def load_user_from_request(req):
    token = _bearer_token()
    if not token:
        return None
    user_id = verify_token(token)
    if user_id is None:
        return None
    user = db.session.get(User, user_id)
    if user is None or user.is_suspended:
        return None
    return user


@login_manager.unauthorized_handler
def unauthorized():
    return jsonify({"error": _("Authentication required")}), 401
