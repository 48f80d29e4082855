"""
Site-wide routes
"""
from flask import Blueprint, current_app, jsonify, redirect, url_for

from ..core.auth import login_required

main_bp = Blueprint('main', __name__)


@main_bp.route('/health')
def health():
    """Site health with the state of the REST API behind it"""
    api_status = current_app.extensions['api_monitor'].check()
    status_code = 200 if api_status['status'] == 'healthy' else 503
    return jsonify({
        'status': 'healthy' if status_code == 200 else 'degraded',
        'service': 'Bakery Site',
        'api': api_status,
    }), status_code


@main_bp.route('/admin')
@main_bp.route('/admin/')
@login_required
def admin_home():
    return redirect(url_for('menu_admin.dashboard'))
