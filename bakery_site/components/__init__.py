"""
Site components
Each component is a blueprint (routes.py) with its view logic in service.py
and its templates in a templates/ folder next to them.
"""
