from flask import Flask, jsonify

from library_api.config import Config
from library_api.errors import register_error_handlers
from library_api.extensions import db, migrate


def create_app(config_object=None):
    app = Flask(__name__)
    app.config.from_object(config_object or Config)
    app.logger.setLevel(app.config["LOG_LEVEL"])

    # /api/books ve /api/books/ aynı endpoint
    app.url_map.strict_slashes = False

    # 1) db init; modeller metadata'ya kayıt olsun diye import edilir
    db.init_app(app)
    from library_api import models  # noqa: F401

    # 2) migration (flask db ...)
    migrate.init_app(app, db)

    # 3) API blueprintleri
    from library_api.controllers.author_controller import author_bp
    from library_api.controllers.book_controller import book_bp
    from library_api.controllers.category_controller import category_bp
    from library_api.controllers.docs_controller import docs_bp
    from library_api.controllers.loan_controller import loan_bp
    from library_api.controllers.user_controller import user_bp

    prefix = app.config["API_PREFIX"].rstrip("/")
    app.register_blueprint(user_bp, url_prefix=f"{prefix}/users")
    app.register_blueprint(book_bp, url_prefix=f"{prefix}/books")
    app.register_blueprint(author_bp, url_prefix=f"{prefix}/authors")
    app.register_blueprint(category_bp, url_prefix=f"{prefix}/categories")
    app.register_blueprint(loan_bp, url_prefix=f"{prefix}/loans")
    app.register_blueprint(docs_bp)

    @app.get("/health")
    def health():
        return jsonify({"status": "ok"})

    # 4) merkezi hata çevirici
    register_error_handlers(app)

    # 5) CLI: flask init-db / flask seed
    from library_api.cli import register_cli
    register_cli(app)

    app.logger.info(f"[app] library api ready (env={app.config['APP_ENV']}, prefix={prefix})")
    return app
