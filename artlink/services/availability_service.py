# artlink/services/availability_service.py
"""Artists advertising when and for what they can take work."""
import logging
from decimal import Decimal, InvalidOperation

from flask_babel import gettext as _
from sqlalchemy.orm import joinedload

from ..extensions import db
from ..models.availability import (
    AvailabilityPost,
    AVAILABILITY_CATEGORIES,
    AVAILABILITY_TYPES,
    AVAILABILITY_STATUSES,
)
from ..models.serializers import split_csv
from ..models.user import ArtistProfile
from .errors import Forbidden, NotFound, ValidationFailure
from .fields import text, optional_text, string_list
from .profile_resolver import artist_profile_for

log = logging.getLogger(__name__)

TITLE_MIN = 5
DESCRIPTION_MIN = 20


def _choice(raw, choices, field, default=None):
    val = text(raw, field).lower() or default
    if val not in choices:
        raise ValidationFailure(
            _("%(field)s must be one of: %(choices)s", field=field, choices=", ".join(choices))
        )
    return val


def _budget(raw):
    if raw is None or str(raw).strip() == "":
        return None
    try:
        amount = Decimal(str(raw).replace(",", "").strip())
    except (InvalidOperation, ValueError):
        raise ValidationFailure(_("Budget must be a number"))
    if not amount.is_finite() or amount < 0:
        raise ValidationFailure(_("Budget must be a positive amount"))
    return amount


def _apply(post: AvailabilityPost, data: dict, partial: bool):
    if not partial or "title" in data:
        title = text(data.get("title"), "title")
        if len(title) < TITLE_MIN:
            raise ValidationFailure(_("Title must be at least %(n)d characters long", n=TITLE_MIN))
        post.title = title
    if not partial or "description" in data:
        description = text(data.get("description"), "description")
        if len(description) < DESCRIPTION_MIN:
            raise ValidationFailure(_("Description must be at least %(n)d characters long", n=DESCRIPTION_MIN))
        post.description = description
    if not partial or "category" in data:
        post.category = _choice(data.get("category"), AVAILABILITY_CATEGORIES, "category", default="other")
    if not partial or "availability_type" in data:
        post.availability_type = _choice(data.get("availability_type"), AVAILABILITY_TYPES,
                                         "availabilityType", default="flexible")
    if not partial or "status" in data:
        post.status = _choice(data.get("status"), AVAILABILITY_STATUSES, "status", default="active")
    if not partial or "budget" in data:
        post.budget = _budget(data.get("budget"))
    if not partial or "skills" in data:
        post.skills = ", ".join(split_csv(data.get("skills"))) or None
    if not partial or "portfolio_samples" in data:
        post.portfolio_samples = string_list(data.get("portfolio_samples"), "portfolioSamples")
    for field, label in (("duration", "duration"), ("location", "location"),
                         ("contact_preference", "contactPreference")):
        if not partial or field in data:
            setattr(post, field, optional_text(data.get(field), label))
    if post.contact_preference is None:
        post.contact_preference = "platform"


def _owned(post_id, caller_user_id) -> AvailabilityPost:
    post = get_post(post_id)
    artist = artist_profile_for(caller_user_id)
    if artist is None or post.artist_id != artist.id:
        raise Forbidden(_("Only the artist who posted this can change it"))
    return post


def create_post(caller_user_id, data: dict) -> AvailabilityPost:
    artist = artist_profile_for(caller_user_id)
    if artist is None:
        raise Forbidden(_("Only artists can post availability"))

    post = AvailabilityPost(artist_id=artist.id)
    _apply(post, data, partial=False)
    db.session.add(post)
    db.session.commit()
    log.info("Availability post %s created by artist %s", post.id, artist.id)
    return post


def list_posts(category=None, artist_id=None, status=None) -> list[AvailabilityPost]:
    qry = AvailabilityPost.query.options(
        joinedload(AvailabilityPost.artist).joinedload(ArtistProfile.user)
    )
    if category:
        qry = qry.filter(AvailabilityPost.category == category.strip().lower())
    if artist_id is not None:
        qry = qry.filter(AvailabilityPost.artist_id == artist_id)
    qry = qry.filter(AvailabilityPost.status == _choice(status, AVAILABILITY_STATUSES, "status", default="active"))
    return qry.order_by(AvailabilityPost.created_at.desc(), AvailabilityPost.id.desc()).all()


def get_post(post_id) -> AvailabilityPost:
    post = db.session.get(AvailabilityPost, post_id)
    if post is None:
        raise NotFound(_("Availability post not found"))
    return post


def update_post(post_id, caller_user_id, data: dict) -> AvailabilityPost:
    post = _owned(post_id, caller_user_id)
    _apply(post, data, partial=True)
    db.session.commit()
    return post


def delete_post(post_id, caller_user_id) -> None:
    post = _owned(post_id, caller_user_id)
    db.session.delete(post)
    db.session.commit()
    log.info("Availability post %s deleted", post_id)
