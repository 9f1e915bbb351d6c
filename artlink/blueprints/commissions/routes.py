# artlink/blueprints/commissions/routes.py
from flask import jsonify, current_app
from flask_babel import gettext as _
from flask_login import login_required, current_user

from ...services import commission_service
from ...services.errors import Forbidden
from ..utils import validated
from . import commissions_bp
from .forms import CommissionForm, StatusForm, ProgressUpdateForm


@commissions_bp.post('')
@login_required
def create():
    form = validated(CommissionForm)
    commission = commission_service.create_commission(
        client_user_id=current_user.id,
        artist_ref=form.artistId.data,
        description=form.description.data,
        price=form.price.data,
    )
    return jsonify(commission.to_dict()), 201


@commissions_bp.get('/artist/')
@commissions_bp.get('/artist/<artist_id>')
@login_required
def by_artist(artist_id=None):
    items = commission_service.list_for_artist(artist_id, current_user.id)
    return jsonify([c.to_dict(include=("client",)) for c in items])


@commissions_bp.get('/client')
@login_required
def by_client():
    items = commission_service.list_for_client(current_user.id)
    return jsonify([c.to_dict(include=("artist",)) for c in items])


@commissions_bp.patch('/<int:commission_id>/status')
@login_required
def update_status(commission_id):
    form = validated(StatusForm)
    commission = commission_service.update_status(commission_id, form.status.data, current_user.id)
    return jsonify(commission.to_dict())


@commissions_bp.post('/<int:commission_id>/progress')
@login_required
def add_progress(commission_id):
    form = validated(ProgressUpdateForm)
    update = commission_service.add_progress_update(
        commission_id, form.message.data, form.imageUrl.data, current_user.id
    )
    return jsonify(update.to_dict()), 201


@commissions_bp.get('/<int:commission_id>')
@login_required
def detail(commission_id):
    commission = commission_service.get_commission(commission_id, current_user.id)
    return jsonify(commission.to_dict())


@commissions_bp.get('')
@login_required
def list_all():
    # Administrative listing; the admin guard is opt-in via config
    if current_app.config.get("COMMISSIONS_LIST_REQUIRES_ADMIN") and current_user.role != "admin":
        raise Forbidden(_("Access denied"))
    return jsonify([c.to_dict() for c in commission_service.list_all()])
