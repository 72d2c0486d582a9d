"""
Shared helpers for admin blueprints: session guards, error responses and
reading form/JSON payloads (with inline image embedding).
"""

import json
from functools import wraps

from flask import jsonify, redirect, request, session, url_for

from ..core.exceptions import FolioError, ValidationError
from ..core.logging_service import LoggingService
from ..core.storage import embed_upload, is_allowed_image


def admin_api_required(f):
    """Decorator for JSON endpoints: 401 without an admin session"""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if 'admin_id' not in session:
            return jsonify({'error': 'Authentication required'}), 401
        return f(*args, **kwargs)
    return decorated_function


def admin_page_required(f):
    """Decorator for pages: redirect to login without an admin session"""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if 'admin_id' not in session:
            return redirect(url_for('admin.login', next=request.path))
        return f(*args, **kwargs)
    return decorated_function


def error_response(source, error):
    """Turn a folio error into a JSON response, logging server-side failures"""
    if isinstance(error, FolioError):
        if error.status_code >= 500:
            LoggingService.log_error_with_traceback(source, error)
        return jsonify(error.to_dict()), error.status_code

    print(f"Error in {source}: {error}")
    LoggingService.log_error_with_traceback(source, error)
    return jsonify({'error': str(error)}), 500


def read_payload(file_fields=(), list_fields=(), number_fields=()):
    """Read a create/update payload from JSON or a multipart form.

    Form values arrive as strings: list fields may be JSON arrays or comma
    separated, number fields are parsed. Uploaded files in ``file_fields`` are
    embedded as data URLs.
    """
    if request.is_json:
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            raise ValidationError('Request body must be a JSON object')
        return data

    data = {}
    for key, value in request.form.items():
        if key in list_fields:
            data[key] = _parse_list(value)
        elif key in number_fields:
            data[key] = _parse_number(key, value)
        else:
            data[key] = value

    for field in file_fields:
        upload = request.files.get(field)
        if upload is None or not upload.filename:
            continue
        if not is_allowed_image(upload.filename):
            raise ValidationError(f"'{field}' must be an image file", field=field)
        data[field] = embed_upload(upload)

    return data


def _parse_list(value):
    value = value.strip()
    if value.startswith('['):
        try:
            parsed = json.loads(value)
        except json.JSONDecodeError:
            raise ValidationError('Invalid list value')
        return parsed
    return [item.strip() for item in value.split(',') if item.strip()]


def _parse_number(key, value):
    try:
        return float(value) if '.' in value else int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"'{key}' must be a number", field=key)
