from contextlib import contextmanager
from flask import current_app
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import joinedload
from models import db, Client, MagicLink
from .errors import ConfigurationError, PersistenceError


class OnboardingStore:
    """Database access for clients and magic links.

    Every write commits immediately; a failed write rolls the session back
    and raises PersistenceError.
    """

    def __init__(self, session):
        self.session = session

    def get_client(self, client_id):
        return self.session.get(Client, client_id)

    def find_active_link(self, client_id, now):
        """Most recent unused, unexpired link for a client"""
        return (self.session.query(MagicLink)
                .filter(MagicLink.client_id == client_id,
                        MagicLink.used.is_(False),
                        MagicLink.expires_at > now)
                .order_by(MagicLink.created_at.desc())
                .first())

    def get_link_with_client(self, token):
        return (self.session.query(MagicLink)
                .options(joinedload(MagicLink.client))
                .filter_by(token=token)
                .first())

    def insert_link(self, link):
        with self._writing('insert magic link'):
            self.session.add(link)
        return link

    def update_client(self, client_id, fields):
        with self._writing(f'update client {client_id}'):
            self.session.query(Client).filter_by(id=client_id).update(fields, synchronize_session='fetch')

    def mark_link_used(self, token, used_at):
        with self._writing('mark magic link used'):
            self.session.query(MagicLink).filter_by(token=token).update(
                {'used': True, 'used_at': used_at}, synchronize_session='fetch')

    @contextmanager
    def _writing(self, action):
        try:
            yield
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            print(f"[Store] Failed to {action}: {e}")
            raise PersistenceError(str(e)) from e


def get_store():
    """Store bound to the current app's database, or ConfigurationError"""
    if not current_app.config.get('DATABASE_CONFIGURED'):
        raise ConfigurationError()
    return OnboardingStore(db.session)
