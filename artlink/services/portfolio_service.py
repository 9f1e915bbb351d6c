# artlink/services/portfolio_service.py
import logging

from flask_babel import gettext as _
from sqlalchemy.orm import joinedload

from ..extensions import db
from ..models.portfolio import Portfolio, PortfolioTag
from ..models.serializers import split_csv
from ..models.user import User, ArtistProfile
from .errors import NotFound, ValidationFailure
from .fields import text, optional_text, ident

log = logging.getLogger(__name__)


def _base():
    return (Portfolio.query
            .options(joinedload(Portfolio.freelancer).joinedload(ArtistProfile.user))
            .order_by(Portfolio.created_at.desc(), Portfolio.id.desc()))


def _require_freelancer(freelancer_id) -> ArtistProfile:
    freelancer_id = ident(freelancer_id, "freelancerId")
    profile = db.session.get(ArtistProfile, freelancer_id) if freelancer_id is not None else None
    if profile is None:
        raise NotFound(_("Freelancer not found"))
    return profile


def create_portfolio(data: dict) -> Portfolio:
    title = text(data.get("title"), "title")
    if not title:
        raise ValidationFailure(_("Title is required"))
    profile = _require_freelancer(data.get("freelancer_id"))

    p = Portfolio(
        freelancer_id=profile.id,
        title=title,
        description=optional_text(data.get("description"), "description"),
        image_url=optional_text(data.get("image_url"), "imageUrl"),
    )
    p.set_tags(split_csv(data.get("tags")))
    db.session.add(p)
    db.session.commit()
    log.info("Portfolio %s created for freelancer %s", p.id, profile.id)
    return p


def list_portfolios() -> list[Portfolio]:
    return _base().all()


def get_portfolio(portfolio_id) -> Portfolio:
    p = _base().filter(Portfolio.id == portfolio_id).first()
    if p is None:
        raise NotFound(_("Portfolio not found"))
    return p


def update_portfolio(portfolio_id, data: dict) -> Portfolio:
    p = get_portfolio(portfolio_id)

    if "title" in data:
        title = text(data.get("title"), "title")
        if not title:
            raise ValidationFailure(_("Title is required"))
        p.title = title
    if "description" in data:
        p.description = optional_text(data.get("description"), "description")
    if "image_url" in data:
        p.image_url = optional_text(data.get("image_url"), "imageUrl")
    if "freelancer_id" in data:
        p.freelancer_id = _require_freelancer(data.get("freelancer_id")).id
    if "tags" in data:
        # flush the removals first so re-added names don't trip the unique constraint
        p.tag_rows = []
        db.session.flush()
        p.set_tags(split_csv(data.get("tags")))

    db.session.commit()
    return p


def delete_portfolio(portfolio_id) -> None:
    p = db.session.get(Portfolio, portfolio_id)
    if p is None:
        raise NotFound(_("Portfolio not found"))
    db.session.delete(p)
    db.session.commit()
    log.info("Portfolio %s deleted", portfolio_id)


def list_by_freelancer(freelancer_id) -> list[Portfolio]:
    items = _base().filter(Portfolio.freelancer_id == freelancer_id).all()
    if not items:
        raise NotFound(_("No portfolios found for this freelancer"))
    return items


def list_by_tag(tag: str) -> list[Portfolio]:
    tag = (tag or "").strip()
    items = (_base()
             .filter(Portfolio.tag_rows.any(PortfolioTag.name == tag))
             .all()) if tag else []
    if not items:
        raise NotFound(_("No portfolios found with this tag"))
    return items


def list_by_freelancer_name(name: str) -> list[Portfolio]:
    name = (name or "").strip()
    items = []
    if name:
        like = f"%{name}%"
        items = (_base()
                 .join(Portfolio.freelancer)
                 .join(ArtistProfile.user)
                 .filter(User.name.ilike(like))
                 .all())
    if not items:
        raise NotFound(_("No portfolios found for this freelancer name"))
    return items
