"""
Storefront Service
View state for the public home page: menu grid, FAQ, specials and gallery
"""
import logging

from ...core.api_client import ApiError
from ...core.pagination import Paginator
from ...core.presentation import gallery_from_menu

logger = logging.getLogger(__name__)

FAVOURITES = 'all'


class StorefrontService:
    """Service for the Storefront component"""

    def __init__(self, client, config):
        self.client = client
        self.config = config

    def load(self):
        """Fetch everything the home page shows

        Any failed call leaves the page with empty sections.
        """
        try:
            return {
                'categories': self.client.categories.list(),
                'menu_items': self.client.menu.list(),
                'specials': self.client.specials.list(),
                'faqs': self.client.faqs.list(),
            }
        except ApiError as e:
            logger.error(f"Error loading storefront data: {e}")
            return {'categories': [], 'menu_items': [], 'specials': [], 'faqs': []}

    def load_menu(self):
        try:
            return self.client.menu.list()
        except ApiError as e:
            logger.error(f"Error loading menu items: {e}")
            return []

    @staticmethod
    def filter_menu(items, category=FAVOURITES):
        """Items for a category tab, featured first

        The favourites tab lists tagged items; any other tab is a category id.
        """
        if category == FAVOURITES:
            selected = [item for item in items if item.get('tag')]
        else:
            selected = [item for item in items if str(item.get('category_id')) == str(category)]
        # sorted() is stable, so featured items keep their relative order
        return sorted(selected, key=lambda item: not item.get('is_featured'))

    def menu_page(self, items, category=FAVOURITES, page=1):
        return Paginator(self.filter_menu(items, category), self.config['MENU_PAGE_SIZE'], page)

    def gallery(self, items):
        images = gallery_from_menu(items, limit=self.config['GALLERY_MAX_IMAGES'])
        if not images:
            images = self.config['DEFAULT_GALLERY']
        return [dict(image, url=self.client.file_url(image['image_url'])) for image in images]

    def gallery_page(self, gallery, page=1):
        return Paginator(gallery, self.config['GALLERY_PAGE_SIZE'], page)

    def gallery_view(self, gallery, index):
        """Fullscreen state for one gallery image, or None when out of range"""
        if index < 0 or index >= len(gallery):
            return None
        return {
            'image': gallery[index],
            'index': index,
            'total': len(gallery),
            'prev_index': index - 1 if index > 0 else None,
            'next_index': index + 1 if index < len(gallery) - 1 else None,
            # Gallery page the viewer returns to
            'page': index // self.config['GALLERY_PAGE_SIZE'] + 1,
        }
