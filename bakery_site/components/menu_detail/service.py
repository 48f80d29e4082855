"""
Menu Detail Service
"""
import logging

from ...core.api_client import ApiError
from ...core.narration import item_narration
from ...core.presentation import carousel_index, item_images

logger = logging.getLogger(__name__)


class MenuDetailService:
    """Service for the Menu Detail component"""

    def __init__(self, client, config):
        self.client = client
        self.config = config

    def load_item(self, item_id):
        """Fetch one menu item; None when it is missing or the API fails"""
        try:
            return self.client.menu.get(item_id)
        except ApiError as e:
            logger.error(f"Error loading menu item {item_id}: {e}")
            return None

    def narration(self, item):
        return item_narration(item, self.client.file_url, self.config['SPEECH_RATE'])

    def detail(self, item, image_index=0):
        images = item_images(item, self.client.file_url, self.config['PLACEHOLDER_IMAGE'])
        index = carousel_index(image_index, len(images))
        return {
            'item': item,
            'images': images,
            'image_index': index,
            'current_image': images[index],
            'prev_image': carousel_index(index - 1, len(images)),
            'next_image': carousel_index(index + 1, len(images)),
            'narration': self.narration(item),
            'autoplay_delay': self.config['AUTOPLAY_DELAY_MS'],
        }
