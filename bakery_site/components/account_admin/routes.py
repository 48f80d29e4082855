"""
Account Admin Routes
"""
from flask import Blueprint, flash, redirect, render_template, request, url_for

from ...core.auth import api_client, login_required
from ...core.validation import first_error, validate_password_change, validate_registration
from .service import AccountAdminService

account_admin_bp = Blueprint('account_admin', __name__, template_folder='templates', url_prefix='/admin/accounts')


@account_admin_bp.route('')
@login_required
def list_admins():
    admins, error = AccountAdminService(api_client()).admins()
    if error:
        flash(error, 'error')
    return render_template('admin_list.html', admins=admins, active_tab='admins')


@account_admin_bp.route('/register', methods=['GET', 'POST'])
@login_required
def register():
    if request.method == 'GET':
        return render_template('register.html', form={}, errors={}, active_tab='admins')

    cleaned, errors = validate_registration(request.form)
    form = {'name': cleaned['name'], 'username': cleaned['username']}
    if errors:
        return render_template('register.html', form=form, errors=errors, active_tab='admins'), 400

    error = AccountAdminService(api_client()).register(cleaned)
    if error:
        flash(error, 'error')
        return render_template('register.html', form=form, errors={}, active_tab='admins')

    flash('Admin registered successfully', 'success')
    return redirect(url_for('account_admin.list_admins'))


@account_admin_bp.route('/password', methods=['GET', 'POST'])
@login_required
def change_password():
    if request.method == 'GET':
        return render_template('change_password.html', errors={}, active_tab='admins')

    cleaned, errors = validate_password_change(request.form)
    if errors:
        flash(first_error(errors), 'error')
        return render_template('change_password.html', errors=errors, active_tab='admins'), 400

    error = AccountAdminService(api_client()).change_password(cleaned['current_password'], cleaned['new_password'])
    if error:
        flash(error, 'error')
        return render_template('change_password.html', errors={}, active_tab='admins')

    flash('Password changed successfully', 'success')
    return redirect(url_for('account_admin.list_admins'))


def init_account_admin(app):
    """Initialize account admin component with Flask app"""
    app.register_blueprint(account_admin_bp)
    return account_admin_bp
