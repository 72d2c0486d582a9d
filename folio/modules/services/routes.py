"""
Services Admin Routes
=====================
"""

from flask import session, jsonify
from . import services_bp
from ...core.logging_service import LoggingService
from ...core.store import get_store
from ...core.sync import make_panel
from ..helpers import admin_api_required, admin_page_required, error_response, read_payload

COLLECTION = 'services'

# ===== Database Helper Functions =====

def get_all_services_db():
    return get_store(COLLECTION).list()

def get_service_db(service_id):
    return get_store(COLLECTION).get_by_id(service_id)

def create_service_db(fields):
    return get_store(COLLECTION).create(fields)

def update_service_db(service_id, fields):
    return get_store(COLLECTION).update(service_id, fields)

def delete_service_db(service_id):
    return get_store(COLLECTION).delete(service_id)

# ===== Routes =====

@services_bp.route('/')
@admin_page_required
def services_panel():
    try:
        panel = make_panel(COLLECTION, get_store(COLLECTION))
        panel.refresh()
        return jsonify(panel.view())
    except Exception as e:
        return error_response('services', e)

@services_bp.route('/api/services', methods=['GET'])
@admin_api_required
def get_services():
    try:
        return jsonify(get_all_services_db())
    except Exception as e:
        return error_response('services', e)

@services_bp.route('/api/services/<service_id>', methods=['GET'])
@admin_api_required
def get_service(service_id):
    try:
        service = get_service_db(service_id)
        if service:
            return jsonify(service)
        return jsonify({'error': 'Service not found'}), 404
    except Exception as e:
        return error_response('services', e)

@services_bp.route('/api/services', methods=['POST'])
@admin_api_required
def create_service():
    try:
        service = create_service_db(read_payload(file_fields=('icon',)))
        LoggingService.log_user_action('services', 'create service', session.get('admin_id'),
                                       {'id': service['id'], 'title': service['title']})
        return jsonify(service), 201
    except Exception as e:
        return error_response('services', e)

@services_bp.route('/api/services/<service_id>', methods=['PUT', 'PATCH'])
@admin_api_required
def update_service(service_id):
    try:
        service = update_service_db(service_id, read_payload(file_fields=('icon',)))
        LoggingService.log_user_action('services', 'update service', session.get('admin_id'),
                                       {'id': service['id']})
        return jsonify(service)
    except Exception as e:
        return error_response('services', e)

@services_bp.route('/api/services/<service_id>', methods=['DELETE'])
@admin_api_required
def delete_service(service_id):
    try:
        result = delete_service_db(service_id)
        LoggingService.log_user_action('services', 'delete service', session.get('admin_id'),
                                       {'id': result['deleted_id']})
        return jsonify(result)
    except Exception as e:
        return error_response('services', e)
