"""
Shared fixtures for folio tests.

NOTE: pytest is listed under extras_require["dev"] in setup.py.
Install with: pip install -e ".[dev]"
"""

import os
import shutil
import tempfile

import pytest
from flask import Flask

from folio import Folio
from folio.core.database import Database
from folio.core.schema import SCHEMAS
from folio.core.store import ResourceStore


@pytest.fixture
def tmp_db_dir():
    """Create a temporary directory for test databases, cleaned up after."""
    d = tempfile.mkdtemp(prefix="folio-test-")
    yield d
    shutil.rmtree(d, ignore_errors=True)


@pytest.fixture
def db_path(tmp_db_dir):
    """Content database with all collection tables created."""
    path = os.path.join(tmp_db_dir, "folio.db")
    Database.init_store_tables(path)
    return path


@pytest.fixture
def stores(db_path):
    """One ResourceStore per collection, keyed by collection name."""
    return {name: ResourceStore(db_path, schema) for name, schema in SCHEMAS.items()}


@pytest.fixture
def app(tmp_db_dir):
    """Fully initialised Flask app with all folio modules registered."""
    app = Flask(__name__)
    app.config["TESTING"] = True
    app.config["SECRET_KEY"] = "test-secret"
    app.config["DB_DIR"] = tmp_db_dir
    app.config["FOLIO_DB"] = os.path.join(tmp_db_dir, "folio.db")
    app.config["LOGS_DB"] = os.path.join(tmp_db_dir, "app_logs.db")
    app.config["EMAILJS_SERVICE_ID"] = "service_test"
    app.config["EMAILJS_TEMPLATE_ID"] = "template_test"
    app.config["EMAILJS_PUBLIC_KEY"] = "public_test"
    app.config["CONTACT_TO_NAME"] = "Test Owner"
    app.config["CORS_ORIGINS"] = "*"
    Folio(app)
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin_client(client):
    """Test client with an admin session already open."""
    with client.session_transaction() as sess:
        sess["admin_id"] = 1
        sess["admin_email"] = "admin@example.com"
    return client
