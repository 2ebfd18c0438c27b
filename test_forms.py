from werkzeug.datastructures import MultiDict

from schemas import OnboardingForm
from utils.forms import parse_onboarding_form, split_list


def wizard_post(**extra):
    fields = [
        ('company_name', 'Acme Plumbing'),
        ('location_type', 'storefront'),
        ('address', '1 Main St'),
        ('operational_contact.name', 'Jo'),
        ('operational_contact.phone', '555'),
        ('operational_contact.email', 'jo@x.com'),
    ]
    fields.extend(extra.get('fields', []))
    return MultiDict(fields)


def test_minimal_post():
    data = parse_onboarding_form(wizard_post())

    assert data == {
        'company_name': 'Acme Plumbing',
        'location_type': 'storefront',
        'address': '1 Main St',
        'operational_contact': {'name': 'Jo', 'phone': '555', 'email': 'jo@x.com'},
    }
    assert OnboardingForm.model_validate(data).operational_contact.name == 'Jo'


def test_opening_hours():
    data = parse_onboarding_form(wizard_post(fields=[
        ('hours.monday.open', '08:00'),
        ('hours.monday.close', '18:00'),
        ('hours.tuesday.open', '08:00'),
        ('hours.tuesday.close', '18:00'),
        ('hours.tuesday.morning_open', '08:00'),
        ('hours.tuesday.morning_close', '12:00'),
        ('hours.tuesday.afternoon_open', '14:00'),
        ('hours.tuesday.afternoon_close', '18:00'),
        ('hours.sunday.closed', 'on'),
    ]))

    hours = data['operating_hours']
    assert hours['monday'] == {'open': '08:00', 'close': '18:00', 'closed': False}
    assert hours['tuesday']['split_hours']['afternoon_open'] == '14:00'
    assert hours['sunday']['closed'] is True
    assert 'wednesday' not in hours


def test_strategy_and_lists():
    data = parse_onboarding_form(wizard_post(fields=[
        ('strategy_profile.tone', '80'),
        ('strategy_profile.differentiators', '24/7'),
        ('strategy_profile.differentiators', ''),
        ('strategy_profile.differentiators', 'Fixed prices'),
        ('strategy_profile.keywords', 'plumber, emergency plumber,'),
        ('authority_signals.certifications', 'Gas Safe\nWater Regs'),
    ]))

    strategy = data['strategy_profile']
    assert strategy['vibe_sliders'] == {'tone': '80', 'expertise': 50, 'style': 50}
    assert strategy['differentiators'] == ['24/7', 'Fixed prices']
    assert strategy['keywords'] == ['plumber', 'emergency plumber']
    assert data['authority_signals']['certifications'] == ['Gas Safe', 'Water Regs']

    form = OnboardingForm.model_validate(data)
    assert form.strategy_profile.vibe_sliders.tone == 80


def test_competitor_rows_skip_blanks():
    data = parse_onboarding_form(wizard_post(fields=[
        ('competitors.name', 'Rival Pipes'),
        ('competitors.url', 'https://maps.example.com/rival'),
        ('competitors.name', ''),
        ('competitors.url', ''),
        ('competitors.name', 'Drip Co'),
        ('competitors.url', ''),
    ]))

    assert data['competitors'] == [
        {'name': 'Rival Pipes', 'url': 'https://maps.example.com/rival'},
        {'name': 'Drip Co', 'url': ''},
    ]


def test_split_list():
    assert split_list(None) == []
    assert split_list(' a, b ,,c\nd ') == ['a', 'b', 'c', 'd']


def test_untouched_colour_pickers_are_ignored():
    untouched = parse_onboarding_form(wizard_post(fields=[
        ('brand_colors.primary', '#000000'),
        ('brand_colors.secondary', '#FFFFFF'),
    ]))
    picked = parse_onboarding_form(wizard_post(fields=[
        ('brand_colors.primary', '#0044ff'),
        ('brand_colors.secondary', '#ffffff'),
    ]))

    assert 'brand_colors' not in untouched
    assert picked['brand_colors'] == {'primary': '#0044ff', 'secondary': '#ffffff'}
