# artlink/models/serializers.py
"""Small helpers the models share when turning rows into JSON."""


def iso(dt):
    return dt.isoformat() if dt else None


def money(val):
    return float(val) if val is not None else None


def split_csv(raw) -> list[str]:
    """Comma string or list -> stripped, de-duplicated names in order."""
    if not raw:
        return []
    if isinstance(raw, (list, tuple)):
        items = raw
    else:
        items = str(raw).split(",")
    out = []
    for item in items:
        item = str(item).strip()
        if item and item not in out:
            out.append(item)
    return out
