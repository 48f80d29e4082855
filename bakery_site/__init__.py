"""
Bakery storefront and admin dashboard
"""
from .bakery_app import BakeryApp, create_app

__all__ = ['BakeryApp', 'create_app']
