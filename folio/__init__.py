"""
Folio - Portfolio Site and Admin Panel
======================================

A Flask extension serving a personal portfolio site with:
- Admin panels for projects, blogs, services and hero images
- A public read-only API with sample fallbacks
- A contact form delivered through EmailJS

Usage:
    from flask import Flask
    from folio import Folio

    app = Flask(__name__)
    Folio(app)
"""

import os

from .core.config import Config
from .core.database import Database

__version__ = '0.1.0'

# Feature name -> (module path, blueprint attribute)
MODULES = {
    'dashboard': ('folio.modules.dashboard', 'dashboard_bp'),
    'projects': ('folio.modules.projects', 'projects_bp'),
    'blogs': ('folio.modules.blogs', 'blogs_bp'),
    'services': ('folio.modules.services', 'services_bp'),
    'hero_images': ('folio.modules.hero_images', 'hero_images_bp'),
    'public': ('folio.modules.public', 'public_bp'),
    'contact': ('folio.modules.contact', 'contact_bp'),
}


class Folio:
    """Flask extension: resolves config, prepares databases and registers blueprints"""

    def __init__(self, app=None, config=None):
        self._config = config or {}
        self._registered = []
        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        self._apply_config_defaults(app)
        self._setup_database_dir(app)
        Database.init_store_tables(app.config['FOLIO_DB'])
        Database.init_admin_table(app.config['FOLIO_DB'])
        self._register_modules(app)
        app.extensions['folio'] = self

    def _apply_config_defaults(self, app):
        """Fill in app.config keys the host app didn't set"""
        if not app.config.get('SECRET_KEY'):
            app.config['SECRET_KEY'] = Config.SECRET_KEY

        db_dir = app.config.get('DB_DIR') or Config.DB_DIR
        app.config['DB_DIR'] = db_dir
        app.config.setdefault('FOLIO_DB', os.path.join(db_dir, 'folio.db'))
        app.config.setdefault('LOGS_DB', os.path.join(db_dir, 'app_logs.db'))

        for key in ('EMAILJS_SERVICE_ID', 'EMAILJS_TEMPLATE_ID', 'EMAILJS_PUBLIC_KEY',
                    'EMAILJS_API_URL', 'CONTACT_TO_NAME', 'STORE_URL'):
            app.config.setdefault(key, getattr(Config, key))

        from .modules.public.routes import get_allowed_origins
        with app.app_context():
            app.config['CORS_ORIGINS'] = get_allowed_origins()

    def _setup_database_dir(self, app):
        os.makedirs(app.config['DB_DIR'], exist_ok=True)

    def _feature_enabled(self, name):
        return self._config.get('features', {}).get(name, True)

    def _register_modules(self, app):
        import importlib

        for name, (module_path, attr) in MODULES.items():
            if not self._feature_enabled(name):
                continue
            module = importlib.import_module(module_path)
            app.register_blueprint(getattr(module, attr))
            self._registered.append(name)

    def get_registered_modules(self):
        return list(self._registered)


__all__ = ['Folio', 'Config']
