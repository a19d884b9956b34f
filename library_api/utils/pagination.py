import math
from dataclasses import dataclass, field

from library_api.utils.validators import MAX_STORE_INT


@dataclass
class Page:
    items: list = field(default_factory=list)
    total: int = 0
    page: int = 1
    limit: int = 10

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.limit) if self.limit else 0

    def meta(self) -> dict:
        return {
            "total": self.total,
            "page": self.page,
            "limit": self.limit,
            "totalPages": self.total_pages,
        }


def _positive_int(raw, default: int) -> int:
    try:
        value = int(raw)
    except (TypeError, ValueError):
        return default
    return value if 1 <= value <= MAX_STORE_INT else default


def parse_pagination(args, default_limit: int = 10, max_limit: int = 100) -> tuple[int, int]:
    """query string -> (page, limit); geçersiz değerlerde varsayılanlar."""
    page = _positive_int(args.get("page"), 1)
    limit = min(_positive_int(args.get("limit"), default_limit), max_limit)
    # (page - 1) * limit offset'i de SQLite INTEGER içinde kalmalı
    return min(page, MAX_STORE_INT // limit), limit


def paginate(query, page: int, limit: int) -> Page:
    total = query.order_by(None).count()
    items = query.offset((page - 1) * limit).limit(limit).all()
    return Page(items=items, total=total, page=page, limit=limit)
