"""
Admin Auth Component
Login and logout for the admin dashboard
"""
from .routes import admin_auth_bp, init_admin_auth
from .service import AdminAuthService

__all__ = ['admin_auth_bp', 'init_admin_auth', 'AdminAuthService']
