"""
Projects Admin Routes
=====================

CRUD for portfolio projects. A project has a title, description, link, an
ordered list of technologies and an optional image (URL or embedded data URL).
"""

from flask import session, jsonify
from . import projects_bp
from ...core.logging_service import LoggingService
from ...core.store import get_store
from ...core.sync import make_panel
from ..helpers import admin_api_required, admin_page_required, error_response, read_payload

COLLECTION = 'projects'

# ===== Database Helper Functions =====

def get_all_projects_db():
    """Get all projects in creation order"""
    return get_store(COLLECTION).list()

def get_project_db(project_id):
    """Get single project by ID, or None"""
    return get_store(COLLECTION).get_by_id(project_id)

def create_project_db(fields):
    """Create new project, returning it with its id"""
    return get_store(COLLECTION).create(fields)

def update_project_db(project_id, fields):
    """Patch the given fields of an existing project"""
    return get_store(COLLECTION).update(project_id, fields)

def delete_project_db(project_id):
    """Delete project from database"""
    return get_store(COLLECTION).delete(project_id)

def _read_project():
    return read_payload(file_fields=('image',), list_fields=('technologies',))

# ===== Routes =====

@projects_bp.route('/')
@admin_page_required
def projects_panel():
    """Projects panel - samples until the store has projects"""
    try:
        panel = make_panel(COLLECTION, get_store(COLLECTION))
        panel.refresh()
        return jsonify(panel.view())
    except Exception as e:
        return error_response('projects', e)

@projects_bp.route('/api/projects', methods=['GET'])
@admin_api_required
def get_projects():
    """Get all projects"""
    try:
        return jsonify(get_all_projects_db())
    except Exception as e:
        return error_response('projects', e)

@projects_bp.route('/api/projects/<project_id>', methods=['GET'])
@admin_api_required
def get_project(project_id):
    """Get single project"""
    try:
        project = get_project_db(project_id)
        if project:
            return jsonify(project)
        return jsonify({'error': 'Project not found'}), 404
    except Exception as e:
        return error_response('projects', e)

@projects_bp.route('/api/projects', methods=['POST'])
@admin_api_required
def create_project():
    """Create new project"""
    try:
        project = create_project_db(_read_project())
        LoggingService.log_user_action('projects', 'create project', session.get('admin_id'),
                                       {'id': project['id'], 'title': project['title']})
        return jsonify(project), 201
    except Exception as e:
        return error_response('projects', e)

@projects_bp.route('/api/projects/<project_id>', methods=['PUT', 'PATCH'])
@admin_api_required
def update_project(project_id):
    """Update project (only the fields sent are changed)"""
    try:
        project = update_project_db(project_id, _read_project())
        LoggingService.log_user_action('projects', 'update project', session.get('admin_id'),
                                       {'id': project['id']})
        return jsonify(project)
    except Exception as e:
        return error_response('projects', e)

@projects_bp.route('/api/projects/<project_id>', methods=['DELETE'])
@admin_api_required
def delete_project(project_id):
    """Delete project"""
    try:
        result = delete_project_db(project_id)
        LoggingService.log_user_action('projects', 'delete project', session.get('admin_id'),
                                       {'id': result['deleted_id']})
        return jsonify(result)
    except Exception as e:
        return error_response('projects', e)
