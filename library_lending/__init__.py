from flask import Flask, jsonify
from library_lending.config import Config
from library_lending.errors import LendingError
from library_lending.extensions import db, migrate
from library_lending.db_objects import enable_sqlite_foreign_keys, ensure_db_objects


def create_app(config_object=Config):
    app = Flask(__name__)
    app.config.from_object(config_object)

    # 1) db init first (db.engine / db.session depend on it)
    db.init_app(app)
    enable_sqlite_foreign_keys(app)

    # 2) models must be imported before create_all / migrate sees the metadata
    from library_lending.models import author, book, borrow, category, fine, reader  # noqa: F401

    migrate.init_app(app, db)

    # 3) tables + hot_books view
    if app.config.get("AUTO_CREATE_SCHEMA"):
        with app.app_context():
            db.create_all()
        ensure_db_objects(app)

    # 4) blueprints
    from library_lending.controllers.catalog_controller import catalog_bp
    from library_lending.controllers.book_controller import book_bp
    from library_lending.controllers.reader_controller import reader_bp
    from library_lending.controllers.borrow_controller import borrow_bp
    from library_lending.controllers.fine_controller import fine_bp
    from library_lending.controllers.report_controller import report_bp
    app.register_blueprint(catalog_bp)
    app.register_blueprint(book_bp, url_prefix="/books")
    app.register_blueprint(reader_bp, url_prefix="/readers")
    app.register_blueprint(borrow_bp, url_prefix="/borrow")
    app.register_blueprint(fine_bp, url_prefix="/fines")
    app.register_blueprint(report_bp, url_prefix="/reports")

    # 5) CLI (flask init-db / flask seed-demo)
    from library_lending.cli import register_cli
    register_cli(app)

    @app.errorhandler(LendingError)
    def handle_lending_error(e):
        return jsonify({"success": False, "message": str(e)}), e.status_code

    @app.get("/health")
    def health():
        return jsonify({"ok": True})

    return app
