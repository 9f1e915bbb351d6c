# artlink/blueprints/portfolios/routes.py
from flask import jsonify
from flask_login import login_required

from ...services import portfolio_service
from ..utils import validated, json_payload, present
from . import portfolios_bp
from .forms import PortfolioForm

UPDATABLE = {
    "freelancerId": "freelancer_id",
    "title": "title",
    "description": "description",
    "imageUrl": "image_url",
    "tags": "tags",
}


@portfolios_bp.post('')
@login_required
def create():
    payload = json_payload()
    form = validated(PortfolioForm, payload)
    p = portfolio_service.create_portfolio({
        "freelancer_id": form.freelancerId.data,
        "title": form.title.data,
        "description": form.description.data,
        "image_url": form.imageUrl.data,
        "tags": payload.get("tags"),
    })
    return jsonify(p.to_dict()), 201


@portfolios_bp.get('')
def list_all():
    return jsonify([p.to_dict() for p in portfolio_service.list_portfolios()])


@portfolios_bp.get('/<int:portfolio_id>')
def detail(portfolio_id):
    return jsonify(portfolio_service.get_portfolio(portfolio_id).to_dict())


@portfolios_bp.put('/<int:portfolio_id>')
@login_required
def update(portfolio_id):
    data = present(json_payload(), UPDATABLE)
    p = portfolio_service.update_portfolio(portfolio_id, data)
    return jsonify(p.to_dict())


@portfolios_bp.delete('/<int:portfolio_id>')
@login_required
def delete(portfolio_id):
    portfolio_service.delete_portfolio(portfolio_id)
    return "", 204


@portfolios_bp.get('/freelancer/<int:freelancer_id>')
def by_freelancer(freelancer_id):
    return jsonify([p.to_dict() for p in portfolio_service.list_by_freelancer(freelancer_id)])


@portfolios_bp.get('/tag/<tag>')
def by_tag(tag):
    return jsonify([p.to_dict() for p in portfolio_service.list_by_tag(tag)])


@portfolios_bp.get('/name/<name>')
def by_freelancer_name(name):
    return jsonify([p.to_dict() for p in portfolio_service.list_by_freelancer_name(name)])
