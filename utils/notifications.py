"""
Email notification utilities for agency staff
"""
from flask import current_app
from flask_mail import Message
from markupsafe import escape


def get_staff_recipients():
    """Staff addresses from the comma separated STAFF_NOTIFICATION_EMAILS setting"""
    raw = current_app.config.get('STAFF_NOTIFICATION_EMAILS') or ''
    return [address.strip() for address in raw.split(',') if address.strip()]


def notify_staff_onboarding_completed(client):
    """
    Send one email to the staff list when a client finishes onboarding.

    Args:
        client: The Client whose onboarding was just completed

    Returns:
        int: Number of recipients the email was sent to
    """
    recipients = get_staff_recipients()

    if not recipients:
        print("[NOTIFICATION] No staff recipients configured")
        return 0

    # Check if mail is configured
    if not current_app.config.get('MAIL_SERVER'):
        print("[NOTIFICATION] Email not configured - skipping notification")
        print(f"[NOTIFICATION] Would notify {len(recipients)} staff about client {client.company_name}")
        return 0

    contact = client.operational_contact or {}
    dashboard_url = f"{current_app.config.get('BASE_URL', 'http://localhost:5000')}/dashboard/clients/{client.id}"
    location = client.address if client.location_type == 'storefront' else client.service_area

    try:
        msg = Message(
            subject=f"Onboarding completed: {client.company_name}",
            recipients=recipients,
            sender=current_app.config.get('MAIL_DEFAULT_SENDER')
        )

        msg.body = f"""Hi team,

{client.company_name} has completed the onboarding questionnaire.

Contact: {contact.get('name', '-')} ({contact.get('email', '-')}, {contact.get('phone', '-')})
Location mode: {client.location_type or '-'}
Location: {location or '-'}

Review the profile:
{dashboard_url}
"""

        # Client fields come from the public form
        company, name, email, phone = (escape(value) for value in (
            client.company_name, contact.get('name', '-'), contact.get('email', '-'), contact.get('phone', '-')))

        msg.html = f"""
<html>
<body style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">
    <h2>Onboarding completed</h2>
    <p><strong>{company}</strong> has completed the onboarding questionnaire.</p>
    <ul>
        <li><strong>Contact:</strong> {name} ({email}, {phone})</li>
        <li><strong>Location mode:</strong> {escape(client.location_type or '-')}</li>
        <li><strong>Location:</strong> {escape(location or '-')}</li>
    </ul>
    <p><a href="{escape(dashboard_url)}">Review the profile</a></p>
</body>
</html>
"""

        current_app.extensions['mail'].send(msg)
        print(f"[NOTIFICATION] Sent onboarding notification for {client.company_name} to {len(recipients)} staff")
        return len(recipients)

    except Exception as e:
        print(f"[NOTIFICATION] Failed to send notification: {e}")
        return 0
