"""
Blogs Admin Routes
==================

CRUD for blog posts. ``date`` is a millisecond timestamp; posts created from the
admin form without one are dated now.
"""

import time
from flask import session, jsonify
from . import blogs_bp
from ...core.logging_service import LoggingService
from ...core.store import get_store
from ...core.sync import make_panel
from ..helpers import admin_api_required, admin_page_required, error_response, read_payload

COLLECTION = 'blogs'

# ===== Database Helper Functions =====

def get_all_blogs_db():
    return get_store(COLLECTION).list()

def get_blog_db(blog_id):
    return get_store(COLLECTION).get_by_id(blog_id)

def create_blog_db(fields):
    return get_store(COLLECTION).create(fields)

def update_blog_db(blog_id, fields):
    return get_store(COLLECTION).update(blog_id, fields)

def delete_blog_db(blog_id):
    return get_store(COLLECTION).delete(blog_id)

def now_ms():
    return int(time.time() * 1000)

def _read_blog():
    return read_payload(file_fields=('image',), number_fields=('date',))

# ===== Routes =====

@blogs_bp.route('/')
@admin_page_required
def blogs_panel():
    """Blogs panel - samples until the store has posts"""
    try:
        panel = make_panel(COLLECTION, get_store(COLLECTION))
        panel.refresh()
        return jsonify(panel.view())
    except Exception as e:
        return error_response('blogs', e)

@blogs_bp.route('/api/blogs', methods=['GET'])
@admin_api_required
def get_blogs():
    try:
        return jsonify(get_all_blogs_db())
    except Exception as e:
        return error_response('blogs', e)

@blogs_bp.route('/api/blogs/<blog_id>', methods=['GET'])
@admin_api_required
def get_blog(blog_id):
    try:
        blog = get_blog_db(blog_id)
        if blog:
            return jsonify(blog)
        return jsonify({'error': 'Blog not found'}), 404
    except Exception as e:
        return error_response('blogs', e)

@blogs_bp.route('/api/blogs', methods=['POST'])
@admin_api_required
def create_blog():
    try:
        data = _read_blog()
        if data.get('date') is None:
            data['date'] = now_ms()
        blog = create_blog_db(data)
        LoggingService.log_user_action('blogs', 'create blog', session.get('admin_id'),
                                       {'id': blog['id'], 'title': blog['title']})
        return jsonify(blog), 201
    except Exception as e:
        return error_response('blogs', e)

@blogs_bp.route('/api/blogs/<blog_id>', methods=['PUT', 'PATCH'])
@admin_api_required
def update_blog(blog_id):
    try:
        blog = update_blog_db(blog_id, _read_blog())
        LoggingService.log_user_action('blogs', 'update blog', session.get('admin_id'),
                                       {'id': blog['id']})
        return jsonify(blog)
    except Exception as e:
        return error_response('blogs', e)

@blogs_bp.route('/api/blogs/<blog_id>', methods=['DELETE'])
@admin_api_required
def delete_blog(blog_id):
    try:
        result = delete_blog_db(blog_id)
        LoggingService.log_user_action('blogs', 'delete blog', session.get('admin_id'),
                                       {'id': result['deleted_id']})
        return jsonify(result)
    except Exception as e:
        return error_response('blogs', e)
