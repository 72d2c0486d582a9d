"""
Blogs Admin Module
==================

Admin interface for blog posts (shown as "Insights" on the public site).
Plugs into the admin dashboard module.
"""

from flask import Blueprint

blogs_bp = Blueprint(
    'blogs_admin',
    __name__,
    url_prefix='/admin/blogs'
)

from . import routes

__all__ = ['blogs_bp']
