"""Request payload field helpers.

Every helper raises ``ValidationError`` with a field-specific message, so
services read a JSON body without repeating the type checks.
"""
from library_api.errors import ValidationError
from library_api.utils.dates import parse_datetime

# SQLite INTEGER signed 64-bit; dışındaki değerler sürücüde OverflowError verir
MAX_STORE_INT = 2**63 - 1
MIN_STORE_INT = -(2**63)


def in_store_range(value: int) -> bool:
    return MIN_STORE_INT <= value <= MAX_STORE_INT


def parse_id(raw, name: str = "id") -> int:
    text = str(raw).strip() if raw is not None else ""
    # sadece ASCII rakamlar: "-4", "+4", "1_000" ve unicode rakamlar geçmez
    if not (text.isascii() and text.isdigit()):
        raise ValidationError(f"Invalid {name} format")
    try:
        value = int(text)
    except ValueError:
        # çok uzun rakam dizileri (int max str digits)
        raise ValidationError(f"Invalid {name} format")
    if value > MAX_STORE_INT:
        raise ValidationError(f"Invalid {name} format")
    return value


def ensure_object(data) -> dict:
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def require_str(data: dict, key: str) -> str:
    value = data.get(key)
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{key} is required")
    return value.strip()


def optional_str(data: dict, key: str) -> str | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError(f"{key} must be a string")
    return value.strip() or None


def require_int(data: dict, key: str, minimum: int | None = None) -> int:
    if data.get(key) is None:
        raise ValidationError(f"{key} is required")
    return optional_int(data, key, minimum)


def optional_int(data: dict, key: str, minimum: int | None = None) -> int | None:
    value = data.get(key)
    if value is None:
        return None
    # bool int'in alt sınıfı, kabul etme
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{key} must be an integer")
    if not in_store_range(value):
        raise ValidationError(f"{key} is out of range")
    if minimum is not None and value < minimum:
        raise ValidationError(f"{key} must be >= {minimum}")
    return value


def require_datetime(data: dict, key: str):
    if data.get(key) is None:
        raise ValidationError(f"{key} is required")
    return optional_datetime(data, key)


def optional_datetime(data: dict, key: str):
    value = data.get(key)
    if value is None:
        return None
    try:
        return parse_datetime(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{key} must be an ISO 8601 date")


def optional_int_list(data: dict, key: str) -> list[int] | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, list) or any(
        isinstance(v, bool) or not isinstance(v, int) for v in value
    ):
        raise ValidationError(f"{key} must be a list of integers")
    if not all(in_store_range(v) for v in value):
        raise ValidationError(f"{key} contains an out of range id")
    # sırayı koruyarak tekrarları at
    return list(dict.fromkeys(value))


def require_email(data: dict, key: str = "email") -> str:
    value = require_str(data, key)
    if "@" not in value:
        raise ValidationError(f"{key} must be a valid email address")
    return value
