"""
Projects Admin Module
=====================

Admin interface for the project portfolio.
Plugs into the admin dashboard module.

Provides:
- Project creation and editing
- Inline (embedded) project images
- Technologies tagging
"""

from flask import Blueprint

projects_bp = Blueprint(
    'projects_admin',
    __name__,
    url_prefix='/admin/projects'
)

from . import routes

__all__ = ['projects_bp']
