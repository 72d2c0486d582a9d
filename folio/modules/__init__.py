"""
Folio Modules
=============

Flask blueprint modules for the portfolio site and its admin panel.
"""

__all__ = ['dashboard', 'projects', 'blogs', 'services', 'hero_images', 'public', 'contact']
