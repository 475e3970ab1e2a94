import click

from library_lending.extensions import db
from library_lending.db_objects import ensure_db_objects
from library_lending.seed import seed_demo_data


def register_cli(app):
    @app.cli.command("init-db")
    def init_db():
        """Create tables and the hot_books view."""
        db.create_all()
        ensure_db_objects(app)
        click.echo("Database initialised.")

    @app.cli.command("seed-demo")
    def seed_demo():
        """Load the demo catalog, readers and borrow records."""
        if seed_demo_data():
            click.echo("Demo data loaded.")
        else:
            click.echo("Database already has readers; nothing loaded.")
