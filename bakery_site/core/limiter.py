"""
Request rate limiting
"""
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

# Bound to the app in BakeryApp.create_app; limits come from the app config
limiter = Limiter(key_func=get_remote_address)
