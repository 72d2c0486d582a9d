"""
Services Admin Module
=====================

Admin interface for the services offered on the portfolio site.
A service icon can be an image URL, an icon class name or an embedded image.
"""

from flask import Blueprint

services_bp = Blueprint(
    'services_admin',
    __name__,
    url_prefix='/admin/services'
)

from . import routes

__all__ = ['services_bp']
