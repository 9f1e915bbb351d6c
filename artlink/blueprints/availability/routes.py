# artlink/blueprints/availability/routes.py
from flask import jsonify, request
from flask_login import login_required, current_user

from ...services import availability_service
from ..utils import validated, json_payload, present, arg_int
from . import availability_bp
from .forms import AvailabilityPostForm

FIELDS = {
    "title": "title",
    "description": "description",
    "category": "category",
    "availabilityType": "availability_type",
    "duration": "duration",
    "budget": "budget",
    "location": "location",
    "skills": "skills",
    "portfolioSamples": "portfolio_samples",
    "contactPreference": "contact_preference",
    "status": "status",
}


@availability_bp.post('')
@login_required
def create():
    payload = json_payload()
    validated(AvailabilityPostForm, payload)
    post = availability_service.create_post(current_user.id, present(payload, FIELDS))
    return jsonify(post.to_dict()), 201


@availability_bp.get('')
def list_all():
    items = availability_service.list_posts(
        category=request.args.get('category'),
        artist_id=arg_int('artistId'),
        status=request.args.get('status'),
    )
    return jsonify([p.to_dict() for p in items])


@availability_bp.get('/<int:post_id>')
def detail(post_id):
    return jsonify(availability_service.get_post(post_id).to_dict())


@availability_bp.put('/<int:post_id>')
@login_required
def update(post_id):
    post = availability_service.update_post(post_id, current_user.id, present(json_payload(), FIELDS))
    return jsonify(post.to_dict())


@availability_bp.delete('/<int:post_id>')
@login_required
def delete(post_id):
    availability_service.delete_post(post_id, current_user.id)
    return "", 204
