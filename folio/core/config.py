import os
from dotenv import load_dotenv

load_dotenv(override=True)

class Config:
    """
    Base configuration for the folio site.
    Deployments provide secrets and database paths via environment variables.
    """
    # Flask settings
    SECRET_KEY = os.getenv('FLASK_SECRET_KEY')

    # Get DB_DIR from environment, or use a default if not set
    DB_DIR = os.getenv('DB_DIR', os.path.join(os.getcwd(), 'databases'))

    # Database paths - use environment variables or fallback to DB_DIR
    FOLIO_DB = os.getenv('FOLIO_DB', os.path.join(DB_DIR, "folio.db"))
    LOGS_DB = os.getenv('LOGS_DB', os.path.join(DB_DIR, "app_logs.db"))

    # Table names, keyed by collection
    COLLECTION_TABLES = {
        'projects': 'projects',
        'blogs': 'blogs',
        'services': 'services',
        'heroImages': 'hero_images',
    }
    ADMIN_TABLE = "admin"
    LOGS_TABLE = "app_logs"

    # Store endpoint used by StoreClient (admin tooling running outside the app)
    STORE_URL = os.getenv('STORE_URL', 'http://localhost:5000')
    STORE_TIMEOUT = float(os.getenv('STORE_TIMEOUT', '15'))

    # EmailJS settings for the contact form
    EMAILJS_SERVICE_ID = os.getenv('EMAILJS_SERVICE_ID')
    EMAILJS_TEMPLATE_ID = os.getenv('EMAILJS_TEMPLATE_ID')
    EMAILJS_PUBLIC_KEY = os.getenv('EMAILJS_PUBLIC_KEY')
    EMAILJS_API_URL = os.getenv('EMAILJS_API_URL', 'https://api.emailjs.com/api/v1.0/email/send')
    CONTACT_TO_NAME = os.getenv('CONTACT_TO_NAME', 'Site Owner')

    # Origins allowed to read the public API (comma separated, '*' for any)
    CORS_ORIGINS = os.getenv('CORS_ORIGINS', '*')

    # Port for local server
    port = int(os.getenv('PORT', '5000'))


def get_config_value(key, default=None):
    """Get configuration value: Flask app config first, then Config, then env var"""
    try:
        from flask import current_app
        val = current_app.config.get(key)
        if val:
            return val
    except RuntimeError:
        pass
    val = getattr(Config, key, None)
    if val:
        return val
    return os.getenv(key, default)
