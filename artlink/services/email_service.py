# artlink/services/email_service.py
"""Outgoing mail: one renderer plus the commission notifications built on it."""
import logging

from flask import current_app, render_template
from flask_mail import Message
from jinja2 import TemplateNotFound

from ..extensions import mail

log = logging.getLogger(__name__)


def _bodies(template, ctx):
    """HTML body plus the optional plain-text twin (same stem, .txt)."""
    html = render_template(f"email/{template}", **ctx)
    stem = template.rsplit(".", 1)[0]
    try:
        text = render_template(f"email/{stem}.txt", **ctx)
    except TemplateNotFound:
        text = None
    return html, text


def send_email(*, to, subject, template, **ctx) -> bool:
    """Render and deliver one message. Failures are logged and reported as False."""
    if isinstance(to, str):
        to = [to]
    recipients = [r for r in (to or []) if r]
    if not recipients:
        log.warning("Email %r dropped: no recipient", subject)
        return False

    config = current_app.config
    sender = config.get("MAIL_DEFAULT_SENDER") or config.get("MAIL_USERNAME")
    if not sender:
        log.error("Email %r dropped: MAIL_DEFAULT_SENDER is not set", subject)
        return False

    try:
        html, body = _bodies(template, ctx)
        msg = Message(subject=subject, recipients=recipients, sender=sender, body=body, html=html)
        if config.get("MAIL_SUPPRESS_SEND"):
            log.info("Mail suppressed: %r -> %s", subject, ", ".join(recipients))
        else:
            mail.send(msg)
            log.info("Mailed %r -> %s", subject, ", ".join(recipients))
    except Exception:
        log.exception("Could not send %r to %s", subject, ", ".join(recipients))
        return False
    return True


# -----------------
# Commission notifications
# -----------------

def _enabled() -> bool:
    return bool(current_app.config.get("NOTIFICATIONS_ENABLED", True))


def notify_commission_status(commission, actor_id=None) -> bool:
    """Tell the party that did not make the change."""
    if not _enabled():
        return False
    recipient = commission.client if actor_id == commission.artist_id else commission.artist
    if recipient is None:
        return False
    return send_email(
        to=recipient.email,
        subject=f"Commission #{commission.id} is now {commission.status}",
        template="commission_status.html",
        commission=commission,
        recipient=recipient,
    )


def notify_progress_update(commission, update) -> bool:
    if not _enabled() or commission.client is None:
        return False
    return send_email(
        to=commission.client.email,
        subject=f"New progress on commission #{commission.id}",
        template="progress_update.html",
        commission=commission,
        update=update,
        recipient=commission.client,
    )
