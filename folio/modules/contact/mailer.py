"""
Contact Mailer
==============

Sends contact form messages through the EmailJS REST API.

Configuration (set in Flask app.config or the environment):
    EMAILJS_SERVICE_ID: EmailJS service id
    EMAILJS_TEMPLATE_ID: EmailJS template id
    EMAILJS_PUBLIC_KEY: EmailJS public key (sent as user_id)
    EMAILJS_API_URL: Send endpoint (default: https://api.emailjs.com/api/v1.0/email/send)
    CONTACT_TO_NAME: Name the template addresses the message to
"""

import logging
import re
from typing import Optional

import requests

from ...core.config import Config

# Rejects consecutive dots, leading/trailing dots in local part
_VALID_EMAIL = re.compile(r'^[a-zA-Z0-9_%+-]+(\.[a-zA-Z0-9_%+-]+)*@[a-zA-Z0-9-]+(\.[a-zA-Z0-9-]+)*\.[a-zA-Z]{2,}$')

SUCCESS_MESSAGE = "Thank you for your message! I'll get back to you soon."
FAILURE_MESSAGE = "Something went wrong. Please try again later."

logger = logging.getLogger(__name__)


def is_valid_email(address: str) -> bool:
    return bool(address and _VALID_EMAIL.match(address))


class ContactMailer:
    """EmailJS sender. One attempt per message, no retry."""

    def __init__(self, app=None):
        self.service_id = None
        self.template_id = None
        self.public_key = None
        self.api_url = Config.EMAILJS_API_URL
        self.to_name = Config.CONTACT_TO_NAME
        self.timeout = 15

        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        """Read EmailJS settings from app config, falling back to Config"""
        self.service_id = app.config.get('EMAILJS_SERVICE_ID') or Config.EMAILJS_SERVICE_ID
        self.template_id = app.config.get('EMAILJS_TEMPLATE_ID') or Config.EMAILJS_TEMPLATE_ID
        self.public_key = app.config.get('EMAILJS_PUBLIC_KEY') or Config.EMAILJS_PUBLIC_KEY
        self.api_url = app.config.get('EMAILJS_API_URL') or Config.EMAILJS_API_URL
        self.to_name = app.config.get('CONTACT_TO_NAME') or Config.CONTACT_TO_NAME

        if not self.is_configured:
            logger.warning("EmailJS not configured - contact form sending disabled")

    @property
    def is_configured(self) -> bool:
        return bool(self.service_id and self.template_id and self.public_key)

    def build_payload(self, name: str, email: str, message: str) -> dict:
        return {
            'service_id': self.service_id,
            'template_id': self.template_id,
            'user_id': self.public_key,
            'template_params': {
                'from_name': name,
                'from_email': email,
                'message': message,
                'to_name': self.to_name,
            },
        }

    def send(self, name: str, email: str, message: str) -> bool:
        """Send one contact message. Returns True if EmailJS accepted it."""
        if not self.is_configured:
            logger.error("EmailJS credentials missing")
            return False

        try:
            response = requests.post(self.api_url, json=self.build_payload(name, email, message),
                                     timeout=self.timeout)
        except requests.RequestException as e:
            logger.error(f"EmailJS request failed: {e}")
            return False

        if response.status_code == 200:
            logger.info(f"Contact message from {email} sent")
            return True

        logger.error(f"EmailJS error {response.status_code}: {response.text}")
        return False


def status_message(sent: bool, error: Optional[str] = None) -> str:
    if error:
        return error
    return SUCCESS_MESSAGE if sent else FAILURE_MESSAGE
