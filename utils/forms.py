"""
Turns the flat fields posted by the onboarding wizard into the nested
structure expected by the onboarding schema.

Naming convention: ``group.field`` for nested objects, ``hours.<day>.<field>``
for opening hours, repeated names for lists of objects.
"""
from schemas import WEEKDAYS

SCALAR_FIELDS = (
    'company_name', 'website_url', 'location_type', 'address', 'service_area',
    'seasonality', 'logo_url', 'review_signature', 'review_incentives',
)
SOCIAL_NETWORKS = ('instagram', 'linkedin', 'facebook', 'twitter', 'youtube')
SPLIT_FIELDS = ('morning_open', 'morning_close', 'afternoon_open', 'afternoon_close')
DEFAULT_VIBE = 50
# Values a colour input posts when nothing was picked
DEFAULT_BRAND_COLORS = {'primary': '#000000', 'secondary': '#ffffff'}


def split_list(value):
    """Comma or newline separated input to a list of non-empty items"""
    if not value:
        return []
    return [item.strip() for item in value.replace('\n', ',').split(',') if item.strip()]


def _has_prefix(form, prefix):
    return any(key.startswith(prefix) for key in form.keys())


def _parse_day(form, day):
    prefix = f'hours.{day}.'
    if not _has_prefix(form, prefix):
        return None

    hours = {
        'open': form.get(prefix + 'open', ''),
        'close': form.get(prefix + 'close', ''),
        'closed': prefix + 'closed' in form,
    }
    split = {name: form.get(prefix + name, '').strip() for name in SPLIT_FIELDS}
    if all(split.values()):
        hours['split_hours'] = split
    return hours


def _parse_pairs(form, prefix, first, second):
    """Zip repeated ``prefix.first`` / ``prefix.second`` inputs, skipping blank rows"""
    firsts = form.getlist(f'{prefix}.{first}')
    seconds = form.getlist(f'{prefix}.{second}')
    rows = []
    for index, value in enumerate(firsts):
        other = seconds[index] if index < len(seconds) else ''
        if value.strip():
            rows.append({first: value, second: other})
    return rows


def parse_onboarding_form(form):
    """Build an onboarding payload from a werkzeug MultiDict"""
    data = {name: form.get(name) for name in SCALAR_FIELDS if name in form}

    data['operational_contact'] = {
        'name': form.get('operational_contact.name', ''),
        'phone': form.get('operational_contact.phone', ''),
        'email': form.get('operational_contact.email', ''),
    }

    if _has_prefix(form, 'social_links.'):
        data['social_links'] = {
            network: form.get(f'social_links.{network}') or None
            for network in SOCIAL_NETWORKS
        }

    if _has_prefix(form, 'hours.'):
        data['operating_hours'] = {}
        for day in WEEKDAYS:
            hours = _parse_day(form, day)
            if hours is not None:
                data['operating_hours'][day] = hours

    if _has_prefix(form, 'brand_colors.'):
        colors = {
            'primary': form.get('brand_colors.primary', ''),
            'secondary': form.get('brand_colors.secondary', ''),
        }
        if {key: value.lower() for key, value in colors.items()} != DEFAULT_BRAND_COLORS:
            data['brand_colors'] = colors

    if _has_prefix(form, 'authority_signals.'):
        data['authority_signals'] = {
            'certifications': split_list(form.get('authority_signals.certifications')),
            'warranties': form.get('authority_signals.warranties') or None,
        }

    if _has_prefix(form, 'media_gallery.'):
        data['media_gallery'] = _parse_pairs(form, 'media_gallery', 'url', 'type')

    if _has_prefix(form, 'strategy_profile.'):
        data['strategy_profile'] = {
            'vibe_sliders': {
                slider: form.get(f'strategy_profile.{slider}') or DEFAULT_VIBE
                for slider in ('tone', 'expertise', 'style')
            },
            'pitch': form.get('strategy_profile.pitch') or None,
            'differentiators': [
                item.strip() for item in form.getlist('strategy_profile.differentiators') if item.strip()
            ],
            'persona': form.get('strategy_profile.persona') or None,
            'keywords': split_list(form.get('strategy_profile.keywords')),
        }

    if _has_prefix(form, 'competitors.'):
        data['competitors'] = _parse_pairs(form, 'competitors', 'name', 'url')

    return data
