"""
Hero Images Admin Routes
========================
"""

from flask import session, jsonify
from . import hero_images_bp
from ...core.logging_service import LoggingService
from ...core.store import get_store
from ...core.sync import make_panel
from ..helpers import admin_api_required, admin_page_required, error_response, read_payload

COLLECTION = 'heroImages'

# ===== Database Helper Functions =====

def get_all_hero_images_db():
    return get_store(COLLECTION).list()

def get_hero_image_db(hero_id):
    return get_store(COLLECTION).get_by_id(hero_id)

def create_hero_image_db(fields):
    return get_store(COLLECTION).create(fields)

def update_hero_image_db(hero_id, fields):
    return get_store(COLLECTION).update(hero_id, fields)

def delete_hero_image_db(hero_id):
    return get_store(COLLECTION).delete(hero_id)

# ===== Routes =====

@hero_images_bp.route('/')
@admin_page_required
def hero_images_panel():
    try:
        panel = make_panel(COLLECTION, get_store(COLLECTION))
        panel.refresh()
        return jsonify(panel.view())
    except Exception as e:
        return error_response('hero_images', e)

@hero_images_bp.route('/api/hero-images', methods=['GET'])
@admin_api_required
def get_hero_images():
    try:
        return jsonify(get_all_hero_images_db())
    except Exception as e:
        return error_response('hero_images', e)

@hero_images_bp.route('/api/hero-images/<hero_id>', methods=['GET'])
@admin_api_required
def get_hero_image(hero_id):
    try:
        hero = get_hero_image_db(hero_id)
        if hero:
            return jsonify(hero)
        return jsonify({'error': 'Hero image not found'}), 404
    except Exception as e:
        return error_response('hero_images', e)

@hero_images_bp.route('/api/hero-images', methods=['POST'])
@admin_api_required
def create_hero_image():
    try:
        hero = create_hero_image_db(read_payload(file_fields=('image',)))
        LoggingService.log_user_action('hero_images', 'create hero image', session.get('admin_id'),
                                       {'id': hero['id']})
        return jsonify(hero), 201
    except Exception as e:
        return error_response('hero_images', e)

@hero_images_bp.route('/api/hero-images/<hero_id>', methods=['PUT', 'PATCH'])
@admin_api_required
def update_hero_image(hero_id):
    try:
        hero = update_hero_image_db(hero_id, read_payload(file_fields=('image',)))
        LoggingService.log_user_action('hero_images', 'update hero image', session.get('admin_id'),
                                       {'id': hero['id']})
        return jsonify(hero)
    except Exception as e:
        return error_response('hero_images', e)

@hero_images_bp.route('/api/hero-images/<hero_id>', methods=['DELETE'])
@admin_api_required
def delete_hero_image(hero_id):
    try:
        result = delete_hero_image_db(hero_id)
        LoggingService.log_user_action('hero_images', 'delete hero image', session.get('admin_id'),
                                       {'id': result['deleted_id']})
        return jsonify(result)
    except Exception as e:
        return error_response('hero_images', e)
