# artlink/services/commission_service.py
"""Who may create, read and move a commission request.

Statuses: pending -> accepted | rejected, then completed. Only the role
checks below are enforced; there is no forward-only ordering, so a party may
set a commission back to ``pending``.
"""
import logging
from decimal import Decimal, InvalidOperation

from flask_babel import gettext as _
from sqlalchemy.orm import joinedload

from ..extensions import db
from ..models.commission import CommissionRequest, COMMISSION_STATUSES
from .errors import Forbidden, NotFound, ValidationFailure
from .fields import text, optional_text
from .profile_resolver import (
    ArtistNotFound,
    resolve_artist_reference,
    client_profile_for,
    artist_profile_for,
)
from . import email_service

log = logging.getLogger(__name__)

ARTIST_DECISIONS = ("accepted", "rejected")
CLIENT_DECISIONS = ("completed",)


# -----------------
# Helpers
# -----------------

def _with_parties():
    return CommissionRequest.query.options(
        joinedload(CommissionRequest.artist),
        joinedload(CommissionRequest.client),
    )


def _newest_first(query):
    return query.order_by(CommissionRequest.created_at.desc(), CommissionRequest.id.desc())


def _load(commission_id) -> CommissionRequest:
    commission = _with_parties().filter(CommissionRequest.id == commission_id).first()
    if commission is None:
        raise NotFound(_("Commission not found"))
    return commission


def _is_assigned_artist(commission: CommissionRequest, user_id) -> bool:
    artist = artist_profile_for(user_id)
    return artist is not None and commission.artist_id == artist.user_id


def _is_client(commission: CommissionRequest, user_id) -> bool:
    return user_id is not None and commission.client_id == user_id


def _parse_price(raw) -> Decimal:
    if raw is None or str(raw).strip() == "":
        raise ValidationFailure(_("Price is required"))
    try:
        price = Decimal(str(raw).replace(",", "").strip())
    except (InvalidOperation, ValueError):
        raise ValidationFailure(_("Price must be a number"))
    if not price.is_finite() or price < 0:
        raise ValidationFailure(_("Price must be a positive amount"))
    return price.quantize(Decimal("0.01"))


# -----------------
# Operations
# -----------------

def create_commission(client_user_id, artist_ref, description, price) -> CommissionRequest:
    if client_profile_for(client_user_id) is None:
        raise Forbidden(_("Only clients can create commission requests"))

    resolved = resolve_artist_reference(artist_ref)
    if isinstance(resolved, ArtistNotFound):
        raise NotFound(_("Artist not found"))

    description = text(description, "description")
    if not description:
        raise ValidationFailure(_("Description is required"))

    commission = CommissionRequest(
        artist_id=resolved.user_id,
        client_id=client_user_id,
        description=description,
        price=_parse_price(price),
        status="pending",
    )
    db.session.add(commission)
    db.session.commit()
    log.info("Commission %s created: client=%s artist=%s", commission.id, client_user_id, resolved.user_id)

    return _load(commission.id)


def list_for_artist(artist_ref, caller_user_id) -> list[CommissionRequest]:
    if artist_ref is None or str(artist_ref).strip() == "":
        artist_user_id = caller_user_id
    else:
        resolved = resolve_artist_reference(artist_ref)
        if isinstance(resolved, ArtistNotFound):
            raise NotFound(_("Artist not found"))
        artist_user_id = resolved.user_id

    query = (CommissionRequest.query
             .options(joinedload(CommissionRequest.client))
             .filter(CommissionRequest.artist_id == artist_user_id))
    return _newest_first(query).all()


def list_for_client(caller_user_id) -> list[CommissionRequest]:
    query = (CommissionRequest.query
             .options(joinedload(CommissionRequest.artist))
             .filter(CommissionRequest.client_id == caller_user_id))
    return _newest_first(query).all()


def list_all() -> list[CommissionRequest]:
    return _newest_first(_with_parties()).all()


def get_commission(commission_id, caller_user_id) -> CommissionRequest:
    commission = _load(commission_id)
    if not (_is_assigned_artist(commission, caller_user_id) or _is_client(commission, caller_user_id)):
        raise Forbidden(_("Access denied"))
    return commission


def update_status(commission_id, status, caller_user_id) -> CommissionRequest:
    status = text(status, "status").lower()
    if status not in COMMISSION_STATUSES:
        raise ValidationFailure(_("Status must be one of: %(choices)s", choices=", ".join(COMMISSION_STATUSES)))

    commission = _load(commission_id)

    if status in ARTIST_DECISIONS:
        if not _is_assigned_artist(commission, caller_user_id):
            raise Forbidden(_("Only the assigned artist can accept or reject commissions"))
    elif status in CLIENT_DECISIONS:
        if not _is_client(commission, caller_user_id):
            raise Forbidden(_("Only the client can mark commissions as completed"))

    previous = commission.status
    commission.status = status
    db.session.commit()
    log.info("Commission %s status %s -> %s by user %s", commission.id, previous, status, caller_user_id)

    commission = _load(commission.id)
    if previous != status:
        email_service.notify_commission_status(commission, actor_id=caller_user_id)
    return commission


def add_progress_update(commission_id, message, image_url, caller_user_id):
    commission = _load(commission_id)

    if not _is_assigned_artist(commission, caller_user_id):
        raise Forbidden(_("Only the assigned artist can add progress updates"))

    message = text(message, "message")
    if not message:
        raise ValidationFailure(_("Message is required"))

    update = commission.add_progress_update(message, optional_text(image_url, "imageUrl"))
    db.session.commit()
    log.info("Commission %s progress update #%s added", commission.id, update.position)

    email_service.notify_progress_update(commission, update)
    return update
