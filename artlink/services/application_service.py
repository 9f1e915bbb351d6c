# artlink/services/application_service.py
import logging
from decimal import Decimal, InvalidOperation

from flask_babel import gettext as _
from sqlalchemy.orm import joinedload

from ..extensions import db
from ..models.project import Project, Application, PROJECT_STATUSES, APPLICATION_STATUSES
from ..models.user import ArtistProfile
from .errors import Forbidden, NotFound, ValidationFailure
from .fields import text, optional_text, ident
from .profile_resolver import client_profile_for

log = logging.getLogger(__name__)

MESSAGE_MIN, MESSAGE_MAX = 10, 5000


def _parse_amount(raw):
    if raw is None or str(raw).strip() == "":
        return None
    try:
        amount = Decimal(str(raw).replace(",", "").strip())
    except (InvalidOperation, ValueError):
        raise ValidationFailure(_("Budget must be a number"))
    if not amount.is_finite() or amount < 0:
        raise ValidationFailure(_("Budget must be a positive amount"))
    return amount


def _clean_message(raw):
    message = text(raw, "message")
    if not message:
        return None
    if not (MESSAGE_MIN <= len(message) <= MESSAGE_MAX):
        raise ValidationFailure(
            _("Message must be between %(lo)d and %(hi)d characters", lo=MESSAGE_MIN, hi=MESSAGE_MAX)
        )
    return message


def _clean_status(raw, choices):
    status = text(raw, "status").lower()
    if status not in choices:
        raise ValidationFailure(_("Status must be one of: %(choices)s", choices=", ".join(choices)))
    return status


# -----------------
# Projects
# -----------------

def create_project(client_user_id, data: dict) -> Project:
    if client_profile_for(client_user_id) is None:
        raise Forbidden(_("Only clients can post projects"))

    title = text(data.get("title"), "title")
    if not title:
        raise ValidationFailure(_("Title is required"))

    p = Project(
        client_id=client_user_id,
        title=title,
        description=optional_text(data.get("description"), "description"),
        budget=_parse_amount(data.get("budget")),
        status="open",
    )
    db.session.add(p)
    db.session.commit()
    log.info("Project %s posted by client %s", p.id, client_user_id)
    return p


def list_projects(status=None) -> list[Project]:
    qry = Project.query
    if status:
        qry = qry.filter(Project.status == _clean_status(status, PROJECT_STATUSES))
    return qry.order_by(Project.created_at.desc(), Project.id.desc()).all()


def get_project(project_id) -> Project:
    p = db.session.get(Project, project_id)
    if p is None:
        raise NotFound(_("Project not found"))
    return p


# -----------------
# Applications
# -----------------

def _base():
    return Application.query.options(
        joinedload(Application.project),
        joinedload(Application.freelancer).joinedload(ArtistProfile.user),
    )


def create_application(data: dict) -> Application:
    project_id = ident(data.get("project_id"), "projectId")
    project = db.session.get(Project, project_id) if project_id is not None else None
    if project is None:
        raise NotFound(_("Project not found"))
    freelancer_id = ident(data.get("freelancer_id"), "freelancerId")
    freelancer = db.session.get(ArtistProfile, freelancer_id) if freelancer_id is not None else None
    if freelancer is None:
        raise NotFound(_("Freelancer not found"))

    a = Application(
        project_id=project.id,
        freelancer_id=freelancer.id,
        message=_clean_message(data.get("message")),
        status=_clean_status(data.get("status") or "pending", APPLICATION_STATUSES),
    )
    db.session.add(a)
    db.session.commit()
    log.info("Application %s: freelancer %s -> project %s", a.id, freelancer.id, project.id)
    return a


def list_applications(project_id=None, freelancer_id=None, status=None) -> list[Application]:
    qry = _base()
    if project_id is not None:
        qry = qry.filter(Application.project_id == project_id)
    if freelancer_id is not None:
        qry = qry.filter(Application.freelancer_id == freelancer_id)
    if status:
        qry = qry.filter(Application.status == _clean_status(status, APPLICATION_STATUSES))
    return qry.order_by(Application.created_at.desc(), Application.id.desc()).all()


def get_application(application_id) -> Application:
    a = _base().filter(Application.id == application_id).first()
    if a is None:
        raise NotFound(_("Application not found"))
    return a


def update_application(application_id, data: dict) -> Application:
    a = get_application(application_id)
    if "status" in data:
        a.status = _clean_status(data.get("status"), APPLICATION_STATUSES)
    if "message" in data:
        a.message = _clean_message(data.get("message"))
    db.session.commit()
    return a


def delete_application(application_id) -> None:
    a = db.session.get(Application, application_id)
    if a is None:
        raise NotFound(_("Application not found"))
    db.session.delete(a)
    db.session.commit()
