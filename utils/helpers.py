import re
from datetime import datetime, timezone

SLUG_MAX_LENGTH = 50


def utcnow():
    """Current UTC time as a naive datetime, matching the DateTime columns"""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def create_slug(text, max_length=SLUG_MAX_LENGTH):
    """Create a URL-friendly slug from a company name"""
    slug = (text or '').lower().strip()
    slug = re.sub(r'[^\w\s-]', '', slug, flags=re.ASCII)  # Remove special characters
    slug = re.sub(r'[\s_-]+', '-', slug)  # Spaces and underscores become hyphens
    slug = slug.strip('-')
    return slug[:max_length]


def format_date(value):
    """Format a date consistently (YYYY-MM-DD)"""
    if not value:
        return ''
    return value.strftime('%Y-%m-%d')


def format_datetime(value):
    """Format a datetime consistently (YYYY-MM-DD HH:MM)"""
    if not value:
        return ''
    return value.strftime('%Y-%m-%d %H:%M')
