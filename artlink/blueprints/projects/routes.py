# artlink/blueprints/projects/routes.py
from flask import jsonify, request
from flask_login import login_required, current_user

from ...services import application_service
from ..utils import validated
from . import projects_bp
from .forms import ProjectForm


@projects_bp.post('')
@login_required
def create():
    form = validated(ProjectForm)
    p = application_service.create_project(current_user.id, {
        "title": form.title.data,
        "description": form.description.data,
        "budget": form.budget.data,
    })
    return jsonify(p.to_dict()), 201


@projects_bp.get('')
def list_all():
    items = application_service.list_projects(status=request.args.get('status'))
    return jsonify([p.to_dict() for p in items])


@projects_bp.get('/<int:project_id>')
def detail(project_id):
    return jsonify(application_service.get_project(project_id).to_dict())


@projects_bp.get('/<int:project_id>/applications')
@login_required
def applications(project_id):
    application_service.get_project(project_id)
    items = application_service.list_applications(project_id=project_id)
    return jsonify([a.to_dict() for a in items])
