"""
FAQ Admin Service
"""
import logging

from ...core.api_client import ApiError

logger = logging.getLogger(__name__)


class FaqAdminService:
    """Service for the FAQ Admin component"""

    def __init__(self, client):
        self.client = client

    def list(self):
        """Returns (faqs, error); an API failure gives an empty list"""
        try:
            return self.client.faqs.list(), None
        except ApiError as e:
            logger.error(f"Error loading FAQs: {e}")
            return [], 'Failed to load FAQs'

    def get(self, faq_id):
        return self.client.faqs.get(faq_id)

    def create(self, cleaned):
        faq = self.client.faqs.create(cleaned)
        logger.info("Created FAQ")
        return faq

    def update(self, faq_id, cleaned):
        faq = self.client.faqs.update(faq_id, cleaned)
        logger.info(f"Updated FAQ {faq_id}")
        return faq

    def delete(self, faq_id):
        self.client.faqs.delete(faq_id)
        logger.info(f"Deleted FAQ {faq_id}")
