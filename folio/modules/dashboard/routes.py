"""
Admin Dashboard Routes
======================

Authentication and the overview page for admin users.
"""

from flask import render_template, request, redirect, url_for, flash, session, jsonify
from werkzeug.security import generate_password_hash, check_password_hash
from . import dashboard_bp
from ...core.config import Config, get_config_value
from ...core.database import Database
from ...core.exceptions import FolioError
from ...core.fallbacks import OVERVIEW_FALLBACK
from ...core.logging_service import LoggingService
from ...core.store import get_store
from ...core.sync import PanelState
from ..helpers import admin_api_required, admin_page_required, error_response

# Collection -> overview card title, in display order
OVERVIEW_CARDS = [
    ('projects', 'Total Projects'),
    ('heroImages', 'Total Images'),
    ('blogs', 'Published Blogs'),
    ('services', 'Total Services'),
]


def get_admin_db():
    return get_config_value('FOLIO_DB', Config.FOLIO_DB)


def _wants_json():
    return request.is_json or request.accept_mimetypes.best == 'application/json'


def _credentials():
    if request.is_json:
        data = request.get_json(silent=True) or {}
    else:
        data = request.form
    return (data.get('email') or '').strip().lower(), data.get('password') or ''


def find_admin(email, password):
    """Return (id, email) for matching credentials, or None"""
    with Database.connect(get_admin_db()) as conn:
        cursor = conn.cursor()
        cursor.execute(f"SELECT id, email, password_hash FROM {Config.ADMIN_TABLE} WHERE email = ?",
                       (email,))
        row = cursor.fetchone()

    if row and check_password_hash(row[2], password):
        return row[0], row[1]
    return None


def create_admin_db(email, password):
    with Database.connect(get_admin_db()) as conn:
        cursor = conn.cursor()
        cursor.execute(f"INSERT INTO {Config.ADMIN_TABLE} (email, password_hash) VALUES (?, ?)",
                       (email, generate_password_hash(password)))
        conn.commit()
        return cursor.lastrowid


def get_overview():
    """Counts per collection, each falling back to its single sample record when empty"""
    stats = []
    for collection, title in OVERVIEW_CARDS:
        state = PanelState(OVERVIEW_FALLBACK[collection])
        state.receive_snapshot(get_store(collection).list())
        stats.append({
            'collection': collection,
            'title': title,
            'value': len(state.records),
            'is_fallback': state.is_fallback,
        })
    return stats


@dashboard_bp.route('/login', methods=['GET', 'POST'])
def login():
    """Admin login route"""
    Database.init_admin_table(get_admin_db())

    if request.method == 'POST':
        email, password = _credentials()

        if not email or not password:
            if _wants_json():
                return jsonify({'error': 'Please enter both email and password'}), 400
            flash('Please enter both email and password', 'error')
            return render_template('dashboard/login.html')

        admin = find_admin(email, password)
        if admin:
            session['admin_id'] = admin[0]
            session['admin_email'] = admin[1]
            LoggingService.log_user_action('auth', 'admin login', user_id=admin[0])

            if _wants_json():
                return jsonify({'success': True, 'email': admin[1]})
            flash('Login successful', 'success')
            next_page = request.args.get('next')
            return redirect(next_page or url_for('admin.dashboard'))

        LoggingService.warning('auth', 'Failed admin login', {'email': email})
        if _wants_json():
            return jsonify({'error': 'Invalid email or password'}), 401
        flash('Invalid email or password', 'error')

    return render_template('dashboard/login.html')


@dashboard_bp.route('/logout')
def logout():
    """Admin logout route"""
    session.pop('admin_id', None)
    session.pop('admin_email', None)
    flash('You have been logged out', 'info')
    return redirect(url_for('admin.login'))


@dashboard_bp.route('/create-admin', methods=['GET', 'POST'])
def create_admin():
    """Create the first admin account. Closed once any admin exists."""
    admin_count = Database.init_admin_table(get_admin_db())
    if admin_count > 0:
        if _wants_json():
            return jsonify({'error': 'An admin account already exists'}), 403
        flash('An admin account already exists', 'error')
        return redirect(url_for('admin.login'))

    if request.method == 'POST':
        email, password = _credentials()
        if not email or len(password) < 8:
            message = 'A valid email and a password of at least 8 characters are required'
            if _wants_json():
                return jsonify({'error': message}), 400
            flash(message, 'error')
            return render_template('dashboard/login.html', create=True)

        admin_id = create_admin_db(email, password)
        LoggingService.log_user_action('auth', 'admin created', user_id=admin_id, details={'email': email})
        if _wants_json():
            return jsonify({'success': True, 'id': admin_id}), 201
        flash('Admin account created, please log in', 'success')
        return redirect(url_for('admin.login'))

    return render_template('dashboard/login.html', create=True)


@dashboard_bp.route('/')
@admin_page_required
def dashboard():
    """Dashboard overview page"""
    try:
        stats = get_overview()
    except FolioError as e:
        flash(f'Could not load overview: {e.message}', 'error')
        stats = []
    return render_template('dashboard/dashboard.html', stats=stats,
                           admin_email=session.get('admin_email'))


@dashboard_bp.route('/api/overview')
@admin_api_required
def overview():
    try:
        return jsonify(get_overview())
    except Exception as e:
        return error_response('dashboard', e)


@dashboard_bp.route('/api/logs')
@admin_api_required
def recent_logs():
    """Recent application log entries, optionally filtered by level/source"""
    limit = request.args.get('limit', 100, type=int)
    try:
        logs = LoggingService.get_recent_logs(limit=limit,
                                              level=request.args.get('level'),
                                              source=request.args.get('source'))
        return jsonify(logs)
    except Exception as e:
        return error_response('dashboard', e)


@dashboard_bp.route('/api/logs/cleanup', methods=['POST'])
@admin_api_required
def cleanup_logs():
    days = request.args.get('days', 30, type=int)
    deleted = LoggingService.cleanup_old_logs(days_to_keep=days)
    return jsonify({'success': True, 'deleted': deleted})
