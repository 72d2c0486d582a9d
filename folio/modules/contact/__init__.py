"""
Contact Module
==============

Public contact form endpoint. Messages are delivered through EmailJS.

Usage:
    from folio.modules.contact import contact_bp
    app.register_blueprint(contact_bp)  # POST /api/contact
"""

from flask import Blueprint

contact_bp = Blueprint(
    'contact',
    __name__,
    url_prefix='/api/contact'
)

from . import routes

__all__ = ['contact_bp']
