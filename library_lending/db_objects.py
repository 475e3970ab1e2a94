from sqlalchemy import event, text
from library_lending.extensions import db

HOT_BOOKS_SELECT = """
SELECT b.book_id, b.book_title, COUNT(*) AS borrow_count
FROM borrow_records br
JOIN books b ON br.book_id = b.book_id
GROUP BY b.book_id, b.book_title
HAVING COUNT(*) > 1
"""

# dialect -> view DDL prefix
VIEW_DDL_PREFIX = {
    "sqlite": "CREATE VIEW IF NOT EXISTS",
    "mssql": "CREATE OR ALTER VIEW",
}


def hot_books_view_sql(dialect_name: str) -> str:
    prefix = VIEW_DDL_PREFIX.get(dialect_name, "CREATE OR REPLACE VIEW")
    return f"{prefix} hot_books AS{HOT_BOOKS_SELECT}"


def _sqlite_foreign_keys_on(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def enable_sqlite_foreign_keys(app):
    """SQLite ignores ON DELETE rules unless the pragma is set per connection."""
    with app.app_context():
        engine = db.engine
        if engine.dialect.name == "sqlite" and not event.contains(engine, "connect", _sqlite_foreign_keys_on):
            event.listen(engine, "connect", _sqlite_foreign_keys_on)


def ensure_db_objects(app):
    """Creates the reporting view(s) that the ORM metadata does not cover."""
    with app.app_context():
        conn = db.engine.connect()
        trans = conn.begin()
        try:
            conn.execute(text(hot_books_view_sql(db.engine.dialect.name)))
            trans.commit()
            app.logger.info("[db_objects] hot_books view ensured.")
        except Exception as e:
            trans.rollback()
            app.logger.error(f"[db_objects] ERROR: {e}")
            raise
        finally:
            conn.close()
