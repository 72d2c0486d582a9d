"""
Public Site Module
==================

Read-only JSON API for the public portfolio pages (home hero, projects,
insights, services). CORS-enabled so a separately hosted front end can read it.

Every endpoint returns the live collection, or its sample records while the
collection is empty, with an ``is_fallback`` flag.
"""

from flask import Blueprint

public_bp = Blueprint(
    'public',
    __name__,
    url_prefix='/api'
)

from . import routes

__all__ = ['public_bp']
