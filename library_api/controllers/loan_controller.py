from flask import Blueprint, jsonify

from library_api.extensions import db
from library_api.serializers import loan_to_dict, page_to_dict
from library_api.services.loan_service import LoanService
from library_api.utils.http import flag_arg, json_body, pagination_args
from library_api.utils.validators import parse_id

loan_bp = Blueprint("loans", __name__)


def _service():
    return LoanService(db.session)


@loan_bp.get("/")
def list_loans():
    page, limit = pagination_args()
    result = _service().list_loans(page, limit, active_only=flag_arg("active"))
    return jsonify(page_to_dict(result, loan_to_dict))


@loan_bp.get("/<loan_id>")
def get_loan(loan_id):
    return jsonify(loan_to_dict(_service().get_loan(parse_id(loan_id))))


@loan_bp.post("/")
def create_loan():
    # ödünç al: stok -1 ve loan kaydı tek transaction
    loan = _service().create_loan(json_body())
    return jsonify(loan_to_dict(loan)), 201


@loan_bp.put("/<loan_id>")
def update_loan(loan_id):
    # iade / iade geri alma / dueDate değişikliği
    lid = parse_id(loan_id)
    loan = _service().update_loan(lid, json_body())
    return jsonify(loan_to_dict(loan))


@loan_bp.delete("/<loan_id>")
def delete_loan(loan_id):
    _service().delete_loan(parse_id(loan_id))
    return "", 204
