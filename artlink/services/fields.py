# artlink/services/fields.py
"""Coercion of raw JSON values handed to the services."""
from flask_babel import gettext as _

from .errors import ValidationFailure


def text(raw, field) -> str:
    """Stripped string; a missing value reads as empty."""
    if raw is None:
        return ""
    if not isinstance(raw, str):
        raise ValidationFailure(_("%(field)s must be a string", field=field))
    return raw.strip()


def optional_text(raw, field):
    return text(raw, field) or None


def ident(raw, field):
    """Integer id from an int or a digit string; None when absent."""
    if raw is None or raw == "":
        return None
    if isinstance(raw, int) and not isinstance(raw, bool):
        return raw
    if isinstance(raw, str) and raw.strip().isdigit():
        return int(raw.strip())
    raise ValidationFailure(_("%(field)s must be an integer", field=field))


def string_list(raw, field) -> list[str]:
    """A JSON array (or a single string) of non-empty strings."""
    if not raw:
        return []
    if isinstance(raw, str):
        raw = [raw]
    if not isinstance(raw, (list, tuple)) or not all(isinstance(u, str) for u in raw):
        raise ValidationFailure(_("%(field)s must be a list of strings", field=field))
    return [u.strip() for u in raw if u.strip()]
