"""
Menu Admin Component
Menu items with their images and voice clips
"""
from .routes import menu_admin_bp, init_menu_admin
from .service import MenuAdminService

__all__ = ['menu_admin_bp', 'init_menu_admin', 'MenuAdminService']
