"""
Category Admin Routes
The forms live on the menu dashboard, so every route redirects back there
"""
import logging

from flask import Blueprint, flash, redirect, request, url_for

from ...core.api_client import ApiError
from ...core.auth import api_client, login_required
from ...core.validation import validate_category
from .service import CategoryAdminService

logger = logging.getLogger(__name__)

category_admin_bp = Blueprint('category_admin', __name__, url_prefix='/admin/categories')


def _back():
    return redirect(url_for('menu_admin.dashboard') + '#categories')


@category_admin_bp.route('', methods=['POST'])
@login_required
def create_category():
    cleaned, errors = validate_category(request.form)
    if errors:
        # Blank names are ignored
        return _back()
    try:
        CategoryAdminService(api_client()).create(cleaned['name'])
        flash('Category created successfully', 'success')
    except ApiError as e:
        logger.error(f"Error creating category: {e}")
        flash('Failed to create category', 'error')
    return _back()


@category_admin_bp.route('/<category_id>/rename', methods=['POST'])
@login_required
def rename_category(category_id):
    cleaned, errors = validate_category(request.form)
    if errors:
        return _back()
    try:
        CategoryAdminService(api_client()).rename(category_id, cleaned['name'])
        flash('Category updated successfully', 'success')
    except ApiError as e:
        logger.error(f"Error renaming category {category_id}: {e}")
        flash('Failed to update category', 'error')
    return _back()


@category_admin_bp.route('/<category_id>/delete', methods=['POST'])
@login_required
def delete_category(category_id):
    try:
        CategoryAdminService(api_client()).delete(category_id)
        flash('Category deleted', 'success')
    except ApiError as e:
        logger.error(f"Error deleting category {category_id}: {e}")
        flash('Cannot delete category with items', 'error')
    return _back()


def init_category_admin(app):
    """Initialize category admin component with Flask app"""
    app.register_blueprint(category_admin_bp)
    return category_admin_bp
