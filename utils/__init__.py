from .helpers import create_slug, utcnow, format_date, format_datetime
from .i18n import get_language, t

__all__ = ['create_slug', 'utcnow', 'format_date', 'format_datetime', 'get_language', 't']
