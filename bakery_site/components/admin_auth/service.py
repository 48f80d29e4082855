"""
Admin Auth Service
"""
import logging

from ...core import auth
from ...core.api_client import ApiError

logger = logging.getLogger(__name__)

LOGIN_FAILED = 'Invalid username or password'


class AdminAuthService:
    """Service for the Admin Auth component"""

    def __init__(self, client):
        self.client = client

    def login(self, username, password):
        """Log in against the API and store the session

        Returns an error message, or None on success.
        """
        try:
            body = self.client.auth.login(username, password)
        except ApiError as e:
            logger.warning(f"Login failed for {username}: {e}")
            return e.payload.get('message') or LOGIN_FAILED
        auth.store_login(body)
        logger.info(f"Admin {username} logged in")
        return None

    def logout(self):
        """End the API session; the local session is cleared whatever the API says"""
        try:
            self.client.auth.logout()
        except ApiError as e:
            logger.warning(f"Logout error: {e}")
        finally:
            auth.clear_login()
