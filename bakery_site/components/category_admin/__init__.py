"""
Category Admin Component
Category create/rename/delete from the menu dashboard
"""
from .routes import category_admin_bp, init_category_admin
from .service import CategoryAdminService

__all__ = ['category_admin_bp', 'init_category_admin', 'CategoryAdminService']
