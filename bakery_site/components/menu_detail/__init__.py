"""
Menu Detail Component
Product page with image carousel and voice narration
"""
from .routes import menu_detail_bp, init_menu_detail
from .service import MenuDetailService

__all__ = ['menu_detail_bp', 'init_menu_detail', 'MenuDetailService']
