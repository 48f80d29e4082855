"""
Account Admin Service
"""
import logging

from ...core.api_client import ApiError

logger = logging.getLogger(__name__)


def _api_message(error, fallback):
    return error.payload.get('message') or fallback


class AccountAdminService:
    """Service for the Account Admin component"""

    def __init__(self, client):
        self.client = client

    def admins(self):
        """Returns (admins, error)"""
        try:
            return self.client.auth.admins(), None
        except ApiError as e:
            logger.error(f"Error loading admins: {e}")
            return [], 'Failed to load admins'

    def register(self, cleaned):
        """Register an administrator; returns an error message or None"""
        try:
            self.client.auth.register(cleaned)
        except ApiError as e:
            logger.warning(f"Admin registration failed for {cleaned['username']}: {e}")
            return _api_message(e, 'Failed to register admin')
        logger.info(f"Registered admin {cleaned['username']}")
        return None

    def change_password(self, current_password, new_password):
        try:
            self.client.auth.change_password(current_password, new_password)
        except ApiError as e:
            logger.warning(f"Password change failed: {e}")
            return _api_message(e, 'Failed to change password')
        logger.info("Admin password changed")
        return None
