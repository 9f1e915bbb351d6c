# artlink/blueprints/utils.py
from flask import request
from flask_babel import gettext as _
from flask_wtf import FlaskForm
from werkzeug.datastructures import MultiDict

from ..services.errors import ValidationFailure


class JsonForm(FlaskForm):
    """Form fed from a JSON body; bearer tokens replace CSRF tokens."""

    class Meta:
        csrf = False


def json_payload() -> dict:
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationFailure(_("Request body must be a JSON object"))
    return data


def _formdata(payload: dict) -> MultiDict:
    # Lists (tags, samples) are read from the payload directly, not through fields
    md = MultiDict()
    for key, val in payload.items():
        if val is None or isinstance(val, (list, dict)):
            continue
        md.add(key, str(val))
    return md


def validated(form_cls, payload: dict | None = None):
    """Bind and validate, raising ValidationFailure with the first message."""
    payload = json_payload() if payload is None else payload
    form = form_cls(formdata=_formdata(payload))
    if not form.validate():
        for name, errors in form.errors.items():
            if errors:
                raise ValidationFailure(f"{name}: {errors[0]}")
        raise ValidationFailure()
    return form


def present(payload: dict, mapping: dict) -> dict:
    """Rename the camelCase keys that are actually present to service field names."""
    return {dest: payload[src] for src, dest in mapping.items() if src in payload}


def arg_int(name):
    raw = (request.args.get(name) or "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValidationFailure(_("%(name)s must be an integer", name=name))
