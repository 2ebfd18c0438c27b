from datetime import date, datetime

import pytest

from utils.helpers import create_slug, format_date, format_datetime


@pytest.mark.parametrize('name, slug', [
    ('Acme Plumbing', 'acme-plumbing'),
    ("  L'Atelier & Co.  ", 'latelier-co'),
    ('snake_case__name', 'snake-case-name'),
    ('--Already - hyphenated--', 'already-hyphenated'),
    ('Café Crème', 'caf-crme'),
    ('', ''),
])
def test_create_slug(name, slug):
    assert create_slug(name) == slug


def test_create_slug_truncates_to_fifty_characters():
    slug = create_slug('Very ' * 20)

    assert len(slug) == 50
    assert slug.startswith('very-very-')


def test_format_helpers():
    assert format_date(date(2026, 3, 2)) == '2026-03-02'
    assert format_datetime(datetime(2026, 3, 2, 9, 5)) == '2026-03-02 09:05'
    assert format_date(None) == ''
