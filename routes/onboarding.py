from flask import Blueprint, render_template, request, redirect, url_for, jsonify
from models import db, Client
from schemas import WEEKDAYS
from services import MagicLinkService, OnboardingService
from utils import t
from utils.forms import parse_onboarding_form
from utils.notifications import notify_staff_onboarding_completed

onboarding_bp = Blueprint('onboarding', __name__, url_prefix='/onboarding')

ERROR_STATUS = {
    'invalid': 404,
    'not_found': 404,
    'expired': 410,
    'already_used': 410,
    'invalid_payload': 400,
    'configuration': 500,
    'persistence': 500,
}


def render_link_error(result):
    """Error page for an unusable link"""
    message = t(f'error_{result.error_code}', message=result.error)
    return render_template('onboarding_invalid.html', message=message), ERROR_STATUS.get(result.error_code, 400)


@onboarding_bp.route('/<slug>/<token>', methods=['GET'])
def onboarding_form(slug, token):
    """Onboarding wizard, pre-filled from the client record"""
    result = MagicLinkService().validate(token)
    if not result.valid:
        return render_link_error(result)

    prefill = dict(result.prefilled_data or {})
    prefill.update({key: value for key, value in result.client.items() if value is not None})

    return render_template('onboarding_form.html', client=prefill, slug=slug, token=token,
                           weekdays=WEEKDAYS, field_errors=[])


@onboarding_bp.route('/<slug>/<token>', methods=['POST'])
def submit_onboarding(slug, token):
    """Apply the questionnaire and consume the link"""
    data = request.get_json(silent=True) if request.is_json else parse_onboarding_form(request.form)
    result = OnboardingService().submit(token, data)

    if result.success:
        client = db.session.get(Client, result.client_id)
        notify_staff_onboarding_completed(client)

    if request.is_json:
        status = 200 if result.success else ERROR_STATUS.get(result.error_code, 400)
        return jsonify(result.to_dict()), status

    if result.success:
        return redirect(url_for('onboarding.onboarding_success', slug=slug, token=token))

    if result.error_code == 'invalid_payload':
        return render_template('onboarding_form.html', client=data, slug=slug, token=token,
                               weekdays=WEEKDAYS, field_errors=result.field_errors), 400

    return render_link_error(result)


@onboarding_bp.route('/<slug>/<token>/success')
def onboarding_success(slug, token):
    """Confirmation page shown after a successful submission"""
    return render_template('onboarding_success.html')
