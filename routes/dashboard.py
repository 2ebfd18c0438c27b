from datetime import datetime
from flask import Blueprint, render_template, request, redirect, url_for, flash, jsonify, abort, current_app
from models import db, Client
from services import MagicLinkService
from services.magic_links import build_onboarding_url
from utils import t, utcnow, format_datetime

dashboard_bp = Blueprint('dashboard', __name__, url_prefix='/dashboard')

SUBSCRIPTION_STATUSES = ['active', 'paused', 'cancelled']

# Staff-managed fields edited from the dashboard form
TEXT_FIELDS = ['company_name', 'industry', 'website_url', 'phone', 'address',
               'google_maps_url', 'gbp_location_id', 'notes']


def read_client_form(form):
    """Extract and validate the staff client form. Returns (data, errors)"""
    data = {name: form.get(name, '').strip() or None for name in TEXT_FIELDS}
    errors = []

    if not data['company_name']:
        errors.append(t('company_name_required'))

    status = form.get('subscription_status', 'active')
    data['subscription_status'] = status if status in SUBSCRIPTION_STATUSES else 'active'

    try:
        day = int(form.get('monthly_report_day') or 1)
        if not 1 <= day <= 28:
            raise ValueError(day)
        data['monthly_report_day'] = day
    except ValueError:
        errors.append(t('invalid_report_day'))

    start_date = form.get('subscription_start_date', '').strip()
    data['subscription_start_date'] = None
    if start_date:
        try:
            data['subscription_start_date'] = datetime.strptime(start_date, '%Y-%m-%d').date()
        except ValueError:
            errors.append(t('invalid_start_date'))

    return data, errors


def wants_json():
    return request.accept_mimetypes.best == 'application/json'


@dashboard_bp.route('/')
def index():
    return redirect(url_for('dashboard.clients'))


@dashboard_bp.route('/clients')
def clients():
    """Client list, newest first"""
    clients = Client.query.order_by(Client.created_at.desc()).all()
    return render_template('clients.html', clients=clients)


@dashboard_bp.route('/clients/new', methods=['GET', 'POST'])
def new_client():
    """Create a new client"""
    if request.method == 'POST':
        data, errors = read_client_form(request.form)
        if errors:
            for error in errors:
                flash(error, 'error')
            return render_template('client_form.html', client=data, statuses=SUBSCRIPTION_STATUSES), 400

        client = Client(**data)
        db.session.add(client)
        db.session.commit()

        flash(t('client_created', client.company_name))
        return redirect(url_for('dashboard.client_detail', client_id=client.id))

    return render_template('client_form.html', client=None, statuses=SUBSCRIPTION_STATUSES)


@dashboard_bp.route('/clients/<int:client_id>')
def client_detail(client_id):
    """Client profile with onboarding status and the current magic link"""
    client = db.session.get(Client, client_id) or abort(404)
    now = utcnow()
    active_link = next((link for link in client.magic_links if link.is_active(now)), None)
    active_link_url = None
    if active_link:
        active_link_url = build_onboarding_url(current_app.config['BASE_URL'], client.company_name, active_link.token)

    return render_template('client_detail.html', client=client, active_link=active_link,
                           active_link_url=active_link_url)


@dashboard_bp.route('/clients/<int:client_id>/edit', methods=['GET', 'POST'])
def edit_client(client_id):
    """Update staff-managed client fields"""
    client = db.session.get(Client, client_id) or abort(404)

    if request.method == 'POST':
        data, errors = read_client_form(request.form)
        if errors:
            for error in errors:
                flash(error, 'error')
            return render_template('client_form.html', client=dict(data, id=client.id),
                                   statuses=SUBSCRIPTION_STATUSES), 400

        for name, value in data.items():
            setattr(client, name, value)
        client.updated_at = utcnow()
        db.session.commit()

        flash(t('client_updated', client.company_name))
        return redirect(url_for('dashboard.client_detail', client_id=client.id))

    return render_template('client_form.html', client=client, statuses=SUBSCRIPTION_STATUSES)


@dashboard_bp.route('/clients/<int:client_id>/magic-link', methods=['POST'])
def generate_magic_link(client_id):
    """Return the client's active onboarding link, issuing one if needed"""
    result = MagicLinkService().generate(client_id)

    if wants_json():
        status = 200 if result.success else (404 if result.error_code == 'not_found' else 500)
        return jsonify(result.to_dict()), status

    if not result.success:
        flash(t(f'error_{result.error_code}', message=result.error), 'error')
        if result.error_code == 'not_found':
            return redirect(url_for('dashboard.clients'))
    else:
        key = 'magic_link_reused' if result.reused else 'magic_link_created'
        flash(t(key, url=result.url, expires=format_datetime(result.expires_at)))

    return redirect(url_for('dashboard.client_detail', client_id=client_id))
