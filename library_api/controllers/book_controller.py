from flask import Blueprint, jsonify

from library_api.extensions import db
from library_api.serializers import book_detail, book_list_item, page_to_dict
from library_api.services.book_service import BookService
from library_api.utils.http import json_body, pagination_args
from library_api.utils.validators import parse_id

book_bp = Blueprint("books", __name__)


def _service():
    return BookService(db.session)


@book_bp.get("/")
def list_books():
    page, limit = pagination_args()
    return jsonify(page_to_dict(_service().list_books(page, limit), book_list_item))


@book_bp.get("/<book_id>")
def get_book(book_id):
    book = _service().get_book(parse_id(book_id))
    return jsonify(book_detail(book))


@book_bp.post("/")
def create_book():
    book = _service().create_book(json_body())
    return jsonify(book_list_item(book)), 201


@book_bp.put("/<book_id>")
def update_book(book_id):
    bid = parse_id(book_id)
    book = _service().update_book(bid, json_body())
    return jsonify(book_list_item(book))


@book_bp.delete("/<book_id>")
def delete_book(book_id):
    _service().delete_book(parse_id(book_id))
    return "", 204
