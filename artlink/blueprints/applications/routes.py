# artlink/blueprints/applications/routes.py
from flask import jsonify, request
from flask_login import login_required

from ...services import application_service
from ..utils import validated, json_payload, present, arg_int
from . import applications_bp
from .forms import ApplicationForm


@applications_bp.post('')
@login_required
def create():
    form = validated(ApplicationForm)
    a = application_service.create_application({
        "project_id": form.projectId.data,
        "freelancer_id": form.freelancerId.data,
        "message": form.message.data,
        "status": form.status.data,
    })
    return jsonify(a.to_dict()), 201


@applications_bp.get('')
@login_required
def list_all():
    items = application_service.list_applications(
        project_id=arg_int('projectId'),
        freelancer_id=arg_int('freelancerId'),
        status=request.args.get('status'),
    )
    return jsonify([a.to_dict() for a in items])


@applications_bp.get('/<int:application_id>')
@login_required
def detail(application_id):
    return jsonify(application_service.get_application(application_id).to_dict())


@applications_bp.patch('/<int:application_id>')
@login_required
def update(application_id):
    data = present(json_payload(), {"status": "status", "message": "message"})
    a = application_service.update_application(application_id, data)
    return jsonify(a.to_dict())


@applications_bp.delete('/<int:application_id>')
@login_required
def delete(application_id):
    application_service.delete_application(application_id)
    return "", 204
