"""Check the Alembic migration builds the same schema as the models."""
import sqlalchemy as sa
from flask_migrate import upgrade, downgrade

from app import create_app
from models import db, Client, MagicLink
from conftest import TEST_CONFIG


def migrated_app(tmp_path):
    return create_app(dict(TEST_CONFIG, SQLALCHEMY_DATABASE_URI=f"sqlite:///{tmp_path / 'migration.db'}"))


def test_upgrade_creates_model_tables(tmp_path):
    app = migrated_app(tmp_path)

    with app.app_context():
        upgrade()
        inspector = sa.inspect(db.engine)

        assert {'client', 'magic_link', 'alembic_version'} <= set(inspector.get_table_names())

        for model in (Client, MagicLink):
            table = model.__table__
            columns = {column['name'] for column in inspector.get_columns(table.name)}
            assert columns == set(table.columns.keys()), table.name

        indexes = {index['name']: index for index in inspector.get_indexes('magic_link')}
        assert indexes['ix_magic_link_token']['unique']

        db.engine.dispose()


def test_downgrade_removes_tables(tmp_path):
    app = migrated_app(tmp_path)

    with app.app_context():
        upgrade()
        downgrade(revision='base')

        tables = set(sa.inspect(db.engine).get_table_names())
        assert 'client' not in tables
        assert 'magic_link' not in tables

        db.engine.dispose()
