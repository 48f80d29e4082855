"""
FAQ Admin Routes
"""
from flask import Blueprint, abort, flash, redirect, render_template, request, url_for

from ...core.api_client import ApiError
from ...core.auth import api_client, login_required
from ...core.validation import validate_faq
from .service import FaqAdminService

faq_admin_bp = Blueprint('faq_admin', __name__, template_folder='templates', url_prefix='/admin/faqs')


def _render_form(form, faq=None, errors=None, status=200):
    return render_template(
        'faq_form.html',
        form=form,
        faq=faq,
        errors=errors or {},
        active_tab='faq',
    ), status


@faq_admin_bp.route('')
@login_required
def list_faqs():
    faqs, error = FaqAdminService(api_client()).list()
    if error:
        flash(error, 'error')
    return render_template('faq_list.html', faqs=faqs, active_tab='faq')


@faq_admin_bp.route('/new', methods=['GET', 'POST'])
@login_required
def new_faq():
    if request.method == 'GET':
        return _render_form({'question': '', 'answer': ''})

    cleaned, errors = validate_faq(request.form)
    if errors:
        return _render_form(cleaned, errors=errors, status=400)
    try:
        FaqAdminService(api_client()).create(cleaned)
    except ApiError:
        flash('Failed to save FAQ', 'error')
        return _render_form(cleaned)

    flash('FAQ created successfully', 'success')
    return redirect(url_for('faq_admin.list_faqs'))


@faq_admin_bp.route('/<faq_id>/edit', methods=['GET', 'POST'])
@login_required
def edit_faq(faq_id):
    service = FaqAdminService(api_client())
    try:
        faq = service.get(faq_id)
    except ApiError:
        flash('Failed to load FAQ', 'error')
        return redirect(url_for('faq_admin.list_faqs'))
    if not faq:
        abort(404)

    if request.method == 'GET':
        return _render_form({'question': faq.get('question') or '', 'answer': faq.get('answer') or ''}, faq=faq)

    cleaned, errors = validate_faq(request.form)
    if errors:
        return _render_form(cleaned, faq=faq, errors=errors, status=400)
    try:
        service.update(faq_id, cleaned)
    except ApiError:
        flash('Failed to save FAQ', 'error')
        return _render_form(cleaned, faq=faq)

    flash('FAQ updated successfully', 'success')
    return redirect(url_for('faq_admin.list_faqs'))


@faq_admin_bp.route('/<faq_id>/delete', methods=['POST'])
@login_required
def delete_faq(faq_id):
    try:
        FaqAdminService(api_client()).delete(faq_id)
        flash('FAQ deleted', 'success')
    except ApiError:
        flash('Failed to delete FAQ', 'error')
    return redirect(url_for('faq_admin.list_faqs'))


def init_faq_admin(app):
    """Initialize FAQ admin component with Flask app"""
    app.register_blueprint(faq_admin_bp)
    return faq_admin_bp
