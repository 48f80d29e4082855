"""
Category Admin Service
"""
import logging

logger = logging.getLogger(__name__)


class CategoryAdminService:
    """Service for the Category Admin component"""

    def __init__(self, client):
        self.client = client

    def create(self, name):
        category = self.client.categories.create({'name': name})
        logger.info(f"Created category {name}")
        return category

    def rename(self, category_id, name):
        category = self.client.categories.update(category_id, {'name': name})
        logger.info(f"Renamed category {category_id} to {name}")
        return category

    def delete(self, category_id):
        """Delete a category; the API refuses while items still use it"""
        self.client.categories.delete(category_id)
        logger.info(f"Deleted category {category_id}")
