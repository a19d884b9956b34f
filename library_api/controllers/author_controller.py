from flask import Blueprint, jsonify

from library_api.extensions import db
from library_api.serializers import author_to_dict, page_to_dict
from library_api.services.author_service import AuthorService
from library_api.utils.http import json_body, pagination_args
from library_api.utils.validators import parse_id

author_bp = Blueprint("authors", __name__)


def _service():
    return AuthorService(db.session)


@author_bp.get("/")
def list_authors():
    page, limit = pagination_args()
    return jsonify(page_to_dict(_service().list_authors(page, limit), author_to_dict))


@author_bp.get("/<author_id>")
def get_author(author_id):
    author = _service().get_author(parse_id(author_id))
    return jsonify(author_to_dict(author, include_books=True))


@author_bp.post("/")
def create_author():
    author = _service().create_author(json_body())
    return jsonify(author_to_dict(author)), 201


@author_bp.put("/<author_id>")
def update_author(author_id):
    aid = parse_id(author_id)
    author = _service().update_author(aid, json_body())
    return jsonify(author_to_dict(author))


@author_bp.delete("/<author_id>")
def delete_author(author_id):
    _service().delete_author(parse_id(author_id))
    return "", 204
