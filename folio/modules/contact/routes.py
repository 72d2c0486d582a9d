"""
Contact Routes
==============

POST /api/contact  {name, email, message}

The response always carries a user-visible ``status`` string.
"""

from flask import current_app, jsonify, request
from flask_cors import cross_origin
from . import contact_bp
from .mailer import ContactMailer, is_valid_email, status_message
from ...core.logging_service import LoggingService


def get_mailer():
    """Mailer configured from the current app"""
    mailer = current_app.extensions.get('folio_contact_mailer')
    if mailer is None:
        mailer = ContactMailer(current_app)
        current_app.extensions['folio_contact_mailer'] = mailer
    return mailer


@contact_bp.route('', methods=['POST'])
@cross_origin()
def send_contact():
    data = request.get_json(silent=True) if request.is_json else request.form
    data = data or {}

    name = (data.get('name') or '').strip()
    email = (data.get('email') or '').strip()
    message = (data.get('message') or '').strip()

    if not name or not email or not message:
        return jsonify({'success': False,
                        'status': status_message(False, 'Please fill in your name, email and message.')}), 400
    if not is_valid_email(email):
        return jsonify({'success': False,
                        'status': status_message(False, 'Please enter a valid email address.')}), 400

    sent = get_mailer().send(name, email, message)
    if sent:
        LoggingService.info('contact', 'Contact message sent', {'from_email': email})
    else:
        LoggingService.warning('contact', 'Contact message failed', {'from_email': email})

    return jsonify({'success': sent, 'status': status_message(sent)}), (200 if sent else 502)
