"""
Public Site Routes
==================

GET /api/projects | /api/blogs | /api/services | /api/hero-images

Allowed origins come from the CORS_ORIGINS app config key, which Flask-CORS
reads at request time.
"""

import logging
from flask import jsonify, request
from flask_cors import cross_origin
from . import public_bp
from ...core.config import Config, get_config_value
from ...core.exceptions import FolioError
from ...core.fallbacks import get_fallback
from ...core.store import get_store
from ...core.sync import PanelState

logger = logging.getLogger(__name__)


def get_allowed_origins():
    """CORS_ORIGINS as a list ('*' allows any origin)"""
    origins = get_config_value('CORS_ORIGINS', Config.CORS_ORIGINS)
    if isinstance(origins, (list, tuple)):
        return list(origins)
    if origins.strip() == '*':
        return '*'
    return [o.strip() for o in origins.split(',') if o.strip()]


def collection_view(collection):
    """Live records, or the samples when the collection is empty or the store is down"""
    state = PanelState(get_fallback(collection))
    try:
        state.receive_snapshot(get_store(collection).list())
    except FolioError as e:
        logger.error(f"Public {collection} list failed, serving samples: {e}")
    return state.view()


def _respond(view):
    limit = request.args.get('limit', type=int)
    if limit is not None and limit >= 0:
        view['records'] = view['records'][:limit]
    return jsonify(view)


@public_bp.route('/projects')
@cross_origin()
def public_projects():
    return _respond(collection_view('projects'))


@public_bp.route('/blogs')
@cross_origin()
def public_blogs():
    """Insights page posts, newest first"""
    view = collection_view('blogs')
    view['records'] = sorted(view['records'], key=lambda b: b.get('date') or 0, reverse=True)
    return _respond(view)


@public_bp.route('/services')
@cross_origin()
def public_services():
    return _respond(collection_view('services'))


@public_bp.route('/hero-images')
@cross_origin()
def public_hero_images():
    return _respond(collection_view('heroImages'))
