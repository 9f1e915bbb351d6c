# artlink/blueprints/auth/routes.py
import logging

from flask import jsonify
from flask_babel import gettext as _
from flask_login import login_required, current_user

from ...extensions import db
from ...models.user import User, ClientProfile, ArtistProfile
from ...security import issue_token
from ...services.errors import Conflict, Forbidden, ServiceError
from ..utils import validated
from . import auth_bp
from .forms import RegisterForm, LoginForm

log = logging.getLogger(__name__)


class InvalidCredentials(ServiceError):
    status_code = 401
    default_message = "Invalid email or password."


# -----------------
# Register
# -----------------

@auth_bp.post('/register')
def register():
    form = validated(RegisterForm)
    email = form.email.data.strip().lower()
    role = form.role.data

    if User.query.filter_by(email=email).first():
        raise Conflict(_("Email is already registered. Try logging in."))

    user = User(name=form.name.data.strip(), email=email, role=role)
    user.set_password(form.password.data)
    db.session.add(user)
    db.session.flush()  # get user.id

    # Create 1:1 profile
    if role == 'client':
        prof = ClientProfile(user_id=user.id, company=(form.company.data or '').strip() or None)
    else:
        prof = ArtistProfile(
            user_id=user.id,
            title=(form.title.data or '').strip() or None,
            bio=(form.bio.data or '').strip() or None,
        )
    db.session.add(prof)
    db.session.commit()
    log.info("Registered %s user %s", role, user.id)

    return jsonify({"user": _user_payload(user), "token": issue_token(user.id)}), 201


# -----------------
# Login / Me
# -----------------

@auth_bp.post('/login')
def login():
    form = validated(LoginForm)
    email = form.email.data.strip().lower()
    user = User.query.filter_by(email=email).first()
    if not user or not user.check_password(form.password.data):
        raise InvalidCredentials(_("Invalid email or password."))

    if user.is_suspended:
        raise Forbidden(_("Your account is suspended. Contact support."))

    user.mark_login()
    db.session.commit()
    return jsonify({"user": _user_payload(user), "token": issue_token(user.id)})


@auth_bp.get('/me')
@login_required
def me():
    return jsonify({"user": _user_payload(current_user)})


def _user_payload(user: User) -> dict:
    data = user.to_dict()
    data["clientProfile"] = user.client_profile.to_dict() if user.client_profile else None
    data["artistProfile"] = user.artist_profile.to_dict() if user.artist_profile else None
    return data
