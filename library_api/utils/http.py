from flask import current_app, request

from library_api.utils.pagination import parse_pagination
from library_api.utils.validators import ensure_object


def json_body() -> dict:
    return ensure_object(request.get_json(silent=True))


def pagination_args() -> tuple[int, int]:
    return parse_pagination(
        request.args,
        default_limit=current_app.config["DEFAULT_PAGE_LIMIT"],
        max_limit=current_app.config["MAX_PAGE_LIMIT"],
    )


def flag_arg(name: str) -> bool:
    return (request.args.get(name) or "").strip().lower() in {"1", "true", "yes"}
