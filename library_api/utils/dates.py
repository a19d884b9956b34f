from datetime import datetime, timezone


def utcnow() -> datetime:
    """Naive UTC now; all datetimes are stored as naive UTC."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def parse_datetime(raw) -> datetime:
    """
    ISO 8601 string -> naive UTC datetime.
    "2024-05-01", "2024-05-01T10:00:00Z" ve offset'li değerler kabul edilir.
    Hatalı değerde ValueError fırlatır.
    """
    if isinstance(raw, datetime):
        value = raw
    elif isinstance(raw, str) and raw.strip():
        text = raw.strip()
        if text.endswith("Z") or text.endswith("z"):
            text = text[:-1] + "+00:00"
        value = datetime.fromisoformat(text)
    else:
        raise ValueError(f"invalid datetime: {raw!r}")

    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def isoformat(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None
