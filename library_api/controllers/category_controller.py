from flask import Blueprint, jsonify

from library_api.extensions import db
from library_api.serializers import category_to_dict, page_to_dict
from library_api.services.category_service import CategoryService
from library_api.utils.http import json_body, pagination_args
from library_api.utils.validators import parse_id

category_bp = Blueprint("categories", __name__)


def _service():
    return CategoryService(db.session)


@category_bp.get("/")
def list_categories():
    page, limit = pagination_args()
    return jsonify(page_to_dict(_service().list_categories(page, limit), category_to_dict))


@category_bp.get("/<category_id>")
def get_category(category_id):
    category = _service().get_category(parse_id(category_id))
    return jsonify(category_to_dict(category, include_books=True))


@category_bp.post("/")
def create_category():
    category = _service().create_category(json_body())
    return jsonify(category_to_dict(category)), 201


@category_bp.put("/<category_id>")
def update_category(category_id):
    cid = parse_id(category_id)
    category = _service().update_category(cid, json_body())
    return jsonify(category_to_dict(category))


@category_bp.delete("/<category_id>")
def delete_category(category_id):
    _service().delete_category(parse_id(category_id))
    return "", 204
