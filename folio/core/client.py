"""
Store Client
============

HTTP client for the admin JSON API, for admin tooling that runs outside the Flask
process. Each collection client offers the same contract as ResourceStore, so an
AdminPanel can be driven by either.

    client = StoreClient('https://example.com')
    client.login('admin@example.com', 'secret')
    projects = client.collection('projects')
    projects.create({...})
"""

import logging

import requests

from .config import Config
from .exceptions import NotFoundError, TransportError, ValidationError

logger = logging.getLogger(__name__)

# Collection -> admin API path
COLLECTION_PATHS = {
    'projects': '/admin/projects/api/projects',
    'blogs': '/admin/blogs/api/blogs',
    'services': '/admin/services/api/services',
    'heroImages': '/admin/hero-images/api/hero-images',
}


class StoreClient:
    """Session-authenticated client for one folio deployment"""

    def __init__(self, base_url=None, timeout=None, session=None):
        self.base_url = (base_url or Config.STORE_URL).rstrip('/')
        self.timeout = timeout if timeout is not None else Config.STORE_TIMEOUT
        self.session = session or requests.Session()

    def request(self, method, path, **kwargs):
        url = f"{self.base_url}{path}"
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            logger.error(f"{method} {url} failed: {e}")
            raise TransportError(f"Store unreachable: {e}")

        if response.status_code >= 500:
            raise TransportError(f"Store request failed ({response.status_code}): {_error_message(response)}")
        return response

    def login(self, email, password):
        """Open an admin session. Returns True on success."""
        response = self.request('POST', '/admin/login',
                                json={'email': email, 'password': password})
        if response.status_code != 200:
            logger.warning(f"Admin login rejected for {email}: {_error_message(response)}")
            return False
        return True

    def collection(self, name):
        if name not in COLLECTION_PATHS:
            raise ValueError(f"Unknown collection: {name}")
        return CollectionClient(self, name)


class CollectionClient:
    """list / get_by_id / create / update / delete over HTTP"""

    def __init__(self, client, collection):
        self.client = client
        self.collection = collection
        self.path = COLLECTION_PATHS[collection]

    def _check(self, response, record_id=None):
        if response.status_code == 400:
            raise ValidationError(_error_message(response))
        if response.status_code == 404:
            raise NotFoundError(self.collection, record_id)
        if response.status_code >= 400:
            raise TransportError(f"Store request failed ({response.status_code}): {_error_message(response)}")
        return response.json()

    def list(self):
        return self._check(self.client.request('GET', self.path))

    def get_by_id(self, record_id):
        response = self.client.request('GET', f"{self.path}/{record_id}")
        if response.status_code == 404:
            return None
        return self._check(response, record_id)

    def create(self, fields):
        return self._check(self.client.request('POST', self.path, json=fields))

    def update(self, record_id, partial):
        response = self.client.request('PATCH', f"{self.path}/{record_id}", json=partial)
        return self._check(response, record_id)

    def delete(self, record_id):
        response = self.client.request('DELETE', f"{self.path}/{record_id}")
        return self._check(response, record_id)


def _error_message(response):
    try:
        return response.json().get('error') or response.reason
    except (ValueError, AttributeError):
        return response.text or response.reason
