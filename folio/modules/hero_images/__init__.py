"""
Hero Images Admin Module
========================

Admin interface for the homepage hero slides. Every field (title, subtitle,
image) is optional and defaults to empty text.
"""

from flask import Blueprint

hero_images_bp = Blueprint(
    'hero_images_admin',
    __name__,
    url_prefix='/admin/hero-images'
)

from . import routes

__all__ = ['hero_images_bp']
