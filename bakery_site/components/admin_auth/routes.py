"""
Admin Auth Routes
"""
from flask import Blueprint, current_app, flash, redirect, render_template, request, url_for

from ...core.auth import api_client, is_authenticated
from ...core.limiter import limiter
from ...core.validation import validate_login
from .service import AdminAuthService

admin_auth_bp = Blueprint('admin_auth', __name__, template_folder='templates')


@admin_auth_bp.route('/login', methods=['GET', 'POST'])
@limiter.limit(lambda: current_app.config['LOGIN_RATE_LIMIT'], methods=['POST'])
def login():
    """Admin login form"""
    if request.method == 'GET':
        if is_authenticated():
            return redirect(url_for('menu_admin.dashboard'))
        return render_template('login.html', username='')

    credentials, errors = validate_login(request.form)
    if errors:
        return render_template('login.html', username=credentials['username'], errors=errors), 400

    error = AdminAuthService(api_client()).login(credentials['username'], credentials['password'])
    if error:
        return render_template('login.html', username=credentials['username'], error=error), 401
    return redirect(url_for('menu_admin.dashboard'))


@admin_auth_bp.route('/logout', methods=['POST'])
def logout():
    AdminAuthService(api_client()).logout()
    flash('Logged out', 'success')
    return redirect(url_for('admin_auth.login'))


def init_admin_auth(app):
    """Initialize admin auth component with Flask app"""
    app.register_blueprint(admin_auth_bp)
    return admin_auth_bp
