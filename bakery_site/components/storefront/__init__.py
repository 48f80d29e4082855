"""
Storefront Component
Public home page with the menu grid, FAQ, specials and gallery
"""
from .routes import storefront_bp, init_storefront
from .service import StorefrontService

__all__ = ['storefront_bp', 'init_storefront', 'StorefrontService']
