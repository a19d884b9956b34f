from datetime import datetime

import pytest

from library_api.errors import ValidationError
from library_api.utils.dates import isoformat, parse_datetime
from library_api.utils.pagination import Page, parse_pagination
from library_api.utils.validators import MAX_STORE_INT, optional_int, optional_int_list, parse_id


@pytest.mark.parametrize("total, limit, expected", [(0, 10, 0), (1, 10, 1), (10, 10, 1), (11, 10, 2), (7, 5, 2)])
def test_total_pages_is_ceiling(total, limit, expected):
    assert Page(total=total, limit=limit).total_pages == expected


def test_parse_pagination_defaults_and_cap():
    assert parse_pagination({}) == (1, 10)
    assert parse_pagination({"page": "3", "limit": "5"}) == (3, 5)
    assert parse_pagination({"page": "-1", "limit": "x"}) == (1, 10)
    assert parse_pagination({"limit": "500"}, max_limit=100) == (1, 100)
    assert parse_pagination({"page": "99999999999999999999"}) == (1, 10)
    page, limit = parse_pagination({"page": str(MAX_STORE_INT), "limit": "100"})
    assert limit == 100
    assert (page - 1) * limit <= MAX_STORE_INT


def test_parse_datetime_normalizes_to_naive_utc():
    assert parse_datetime("2024-05-01T10:00:00Z") == datetime(2024, 5, 1, 10, 0)
    assert parse_datetime("2024-05-01T12:00:00+02:00") == datetime(2024, 5, 1, 10, 0)
    assert parse_datetime("2024-05-01") == datetime(2024, 5, 1)
    with pytest.raises(ValueError):
        parse_datetime("yesterday")
    with pytest.raises(ValueError):
        parse_datetime(20240501)


def test_isoformat_handles_none():
    assert isoformat(None) is None
    assert isoformat(datetime(2024, 1, 2, 3, 4, 5)) == "2024-01-02T03:04:05"


def test_parse_id():
    assert parse_id("42") == 42
    with pytest.raises(ValidationError):
        parse_id("4x2")
    with pytest.raises(ValidationError):
        parse_id(None)
    assert parse_id(str(MAX_STORE_INT)) == MAX_STORE_INT
    for raw in ("-4", "+4", "1_000", "\u0664\u0662", str(MAX_STORE_INT + 1), "9" * 5000):
        with pytest.raises(ValidationError):
            parse_id(raw)


def test_int_helpers_reject_bools_and_dedupe_lists():
    with pytest.raises(ValidationError):
        optional_int({"quantity": True}, "quantity")
    assert optional_int({}, "quantity") is None
    assert optional_int_list({"ids": [3, 1, 3, 2]}, "ids") == [3, 1, 2]
    with pytest.raises(ValidationError):
        optional_int_list({"ids": [1, "2"]}, "ids")
    with pytest.raises(ValidationError):
        optional_int({"userId": MAX_STORE_INT + 1}, "userId")
    with pytest.raises(ValidationError):
        optional_int_list({"ids": [1, -(MAX_STORE_INT + 2)]}, "ids")
