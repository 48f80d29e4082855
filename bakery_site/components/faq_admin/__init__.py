"""
FAQ Admin Component
"""
from .routes import faq_admin_bp, init_faq_admin
from .service import FaqAdminService

__all__ = ['faq_admin_bp', 'init_faq_admin', 'FaqAdminService']
