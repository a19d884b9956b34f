import os

from flask import Blueprint, current_app, send_from_directory

docs_bp = Blueprint("docs", __name__)

OPENAPI_FILE = "openapi.json"


@docs_bp.get("/api-docs")
def openapi_document():
    directory = os.path.join(current_app.root_path, "static")
    return send_from_directory(directory, OPENAPI_FILE, mimetype="application/json")
