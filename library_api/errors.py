from flask import jsonify
from sqlalchemy.exc import IntegrityError
from werkzeug.exceptions import HTTPException

from library_api.extensions import db


class ApiError(Exception):
    status_code = 400

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(ApiError):
    status_code = 400


class ConflictError(ApiError):
    # iş kuralı ihlalleri de 400 döner (409 ayrımı yapılmıyor)
    status_code = 400


class NotFoundError(ApiError):
    status_code = 404


def _is_production(app) -> bool:
    return app.config.get("APP_ENV") == "production"


def register_error_handlers(app):
    """
    Tüm hatalar tek noktadan HTTP yanıtına çevrilir.
    Controller'lar hiçbir zaman kısmi yanıt yazmaz; hata buraya düşer.
    """

    @app.errorhandler(ApiError)
    def _handle_api_error(e: ApiError):
        db.session.rollback()
        app.logger.info(f"[errors] {type(e).__name__}: {e.message}")
        return jsonify({"message": e.message}), e.status_code

    @app.errorhandler(IntegrityError)
    def _handle_store_error(e: IntegrityError):
        db.session.rollback()
        app.logger.warning(f"[errors] store constraint violation: {e.orig}")
        body = {"message": "A database error occurred"}
        if not _is_production(app):
            body["error"] = str(e.orig)
        return jsonify(body), 400

    @app.errorhandler(HTTPException)
    def _handle_http_exception(e: HTTPException):
        return jsonify({"message": e.description}), e.code

    @app.errorhandler(Exception)
    def _handle_unknown_error(e: Exception):
        db.session.rollback()
        app.logger.exception(f"[errors] unexpected error: {e}")
        body = {"message": "An unexpected error occurred"}
        if not _is_production(app):
            body["error"] = repr(e)
        return jsonify(body), 500
