"""
Admin session helpers
The session flag only drives a login redirect; the API enforces access
"""
from functools import wraps

from flask import current_app, g, redirect, session, url_for

from .api_client import ApiClient, PLACEHOLDER_TOKEN


def store_login(body):
    """Store the token and user from a login response in the session"""
    data = body.get('data') or {}
    token = data.get('token') or body.get('token') or PLACEHOLDER_TOKEN

    session.permanent = True
    session['auth_token'] = token
    session['is_authenticated'] = True
    if data.get('user'):
        session['user'] = data['user']

    # Drop any client built before login so the next call carries the token
    g.pop('api_client', None)
    return token


def clear_login():
    staging = current_app.extensions.get('image_staging')
    if staging is not None:
        staging.discard(session.get('staging_token'))
    for key in ('auth_token', 'is_authenticated', 'user', 'staging_token'):
        session.pop(key, None)
    g.pop('api_client', None)


def is_authenticated():
    return bool(session.get('is_authenticated') and session.get('auth_token'))


def current_user():
    return session.get('user')


def login_required(view):
    """Redirect to the login page when the session is not logged in"""
    @wraps(view)
    def wrapped(*args, **kwargs):
        if not is_authenticated():
            return redirect(url_for('admin_auth.login'))
        return view(*args, **kwargs)
    return wrapped


def api_client():
    """Get the API client for the current request"""
    if 'api_client' not in g:
        config = current_app.config
        g.api_client = ApiClient(
            config['API_BASE_URL'],
            uploads_url=config['UPLOADS_BASE_URL'],
            token=session.get('auth_token'),
            timeout=config['API_TIMEOUT'],
        )
    return g.api_client
