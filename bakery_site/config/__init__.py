"""
Configuration for the bakery site
"""
from .settings import BakeryConfig, TestingConfig

__all__ = ['BakeryConfig', 'TestingConfig']
