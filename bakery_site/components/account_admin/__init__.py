"""
Account Admin Component
Administrator list, registration and password change
"""
from .routes import account_admin_bp, init_account_admin
from .service import AccountAdminService

__all__ = ['account_admin_bp', 'init_account_admin', 'AccountAdminService']
