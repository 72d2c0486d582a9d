"""
Dashboard Module
================

Admin dashboard for the portfolio site.

Provides core admin functionality:
- Admin authentication (login/logout)
- Admin user creation (first admin only)
- Overview counts for projects, hero images, blogs and services
- Recent application log entries

This is the foundation module that the content panels plug into.
"""

from flask import Blueprint

# Note: Blueprint name is 'admin' so other modules can redirect to 'admin.login'
dashboard_bp = Blueprint(
    'admin',
    __name__,
    url_prefix='/admin',
    template_folder='templates'
)

# Import routes after blueprint is created
from . import routes

__all__ = ['dashboard_bp']
