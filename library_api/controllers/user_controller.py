from flask import Blueprint, jsonify

from library_api.extensions import db
from library_api.serializers import page_to_dict, user_to_dict
from library_api.services.user_service import UserService
from library_api.utils.http import json_body, pagination_args
from library_api.utils.validators import parse_id

user_bp = Blueprint("users", __name__)


def _service():
    return UserService(db.session)


@user_bp.get("/")
def list_users():
    page, limit = pagination_args()
    return jsonify(page_to_dict(_service().list_users(page, limit), user_to_dict))


@user_bp.get("/<user_id>")
def get_user(user_id):
    user = _service().get_user(parse_id(user_id))
    return jsonify(user_to_dict(user, include_loans=True))


@user_bp.post("/")
def create_user():
    user = _service().create_user(json_body())
    return jsonify(user_to_dict(user)), 201


@user_bp.put("/<user_id>")
def update_user(user_id):
    uid = parse_id(user_id)
    user = _service().update_user(uid, json_body())
    return jsonify(user_to_dict(user))


@user_bp.delete("/<user_id>")
def delete_user(user_id):
    _service().delete_user(parse_id(user_id))
    return "", 204
