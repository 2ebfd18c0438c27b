from .database import db
from .client import Client, PROFILE_FIELDS
from .magic_link import MagicLink

__all__ = ['db', 'Client', 'MagicLink', 'PROFILE_FIELDS']
