"""
Menu Admin Service
Menu item management: dashboard filters, item CRUD, images and voice clips
"""
import logging

from ...core.api_client import ApiError, upload_files
from ...core.narration import has_voice, voice_badge
from ...core.presentation import item_images, main_image
from ...core.staging import StagingError
from ...core.validation import check_image_limit, menu_item_fields

logger = logging.getLogger(__name__)

FEATURED_FILTERS = ('all', 'featured', 'not_featured')
KPI_FILTERS = ('categories', 'featured', 'voice')


class MenuAdminService:
    """Service for the Menu Admin component"""

    def __init__(self, client, staging, config):
        self.client = client
        self.staging = staging
        self.config = config

    # Dashboard

    @staticmethod
    def resolve_filters(args):
        """Read table filters from query arguments

        The featured KPI pill links with featured=featured; the featured
        buttons can still change the filter afterwards.
        """
        kpi = args.get('kpi') if args.get('kpi') in KPI_FILTERS else None
        featured = args.get('featured', 'all')
        if featured not in FEATURED_FILTERS:
            featured = 'all'
        return {
            'search': (args.get('search') or '').strip(),
            'featured': featured,
            'category': args.get('category', 'all') or 'all',
            'kpi': kpi,
        }

    @staticmethod
    def filter_items(items, search='', featured='all', category='all', kpi=None):
        term = search.lower()

        def matches(item):
            if term and term not in (item.get('name') or '').lower() \
                    and term not in (item.get('category_name') or '').lower():
                return False
            if featured == 'featured' and not item.get('is_featured'):
                return False
            if featured == 'not_featured' and item.get('is_featured'):
                return False
            if category != 'all' and str(item.get('category_id')) != str(category):
                return False
            if kpi == 'voice' and not has_voice(item):
                return False
            return True

        return [item for item in items if matches(item)]

    def dashboard(self, filters):
        """Everything the menu tab shows; API failures leave it empty"""
        try:
            menu_items = self.client.menu.list(available='all')
            categories = self.client.categories.list()
            stats = self.client.stats.get()
            error = None
        except ApiError as e:
            logger.error(f"Error loading dashboard data: {e}")
            menu_items, categories, stats = [], [], {}
            error = 'Failed to load data'

        counts = {}
        for item in menu_items:
            key = str(item.get('category_id'))
            counts[key] = counts.get(key, 0) + 1

        rows = [
            {
                'item': item,
                'thumbnail': main_image(item, self.client.file_url, self.config['PLACEHOLDER_IMAGE']),
                'voice': voice_badge(item),
            }
            for item in self.filter_items(menu_items, **filters)
        ]

        return {
            'stats': stats,
            'categories': [dict(cat, item_count=counts.get(str(cat.get('id')), 0)) for cat in categories],
            'rows': rows,
            'filters': filters,
            'error': error,
        }

    # Items

    def load_item(self, item_id):
        return self.client.menu.get(item_id)

    def load_categories(self):
        try:
            return self.client.categories.list()
        except ApiError as e:
            logger.error(f"Error loading categories: {e}")
            return []

    def images_for(self, item):
        if not item.get('images'):
            return []
        return item_images(item, self.client.file_url, self.config['PLACEHOLDER_IMAGE'])

    def create_item(self, cleaned, voice_file=None, staging_token=None):
        """Create an item, then upload its staged images one after another

        Returns (item, error). When creation succeeds but an image upload
        fails, or the API returns no id to upload to, the item is returned
        together with the error.
        """
        item = self.client.menu.create(menu_item_fields(cleaned), files=self._voice_files(voice_file))
        logger.info(f"Created menu item {item.get('id') if item else None}")
        if not staging_token or not self.staging.entries(staging_token):
            return item, None
        if not item or not item.get('id'):
            logger.error("Created menu item has no id; staged images were not uploaded")
            return item, StagingError('Created item has no id to upload images to')

        try:
            self.staging.persist(staging_token, self.client, item['id'])
        except ApiError as e:
            logger.error(f"Error uploading staged images for item {item['id']}: {e}")
            return item, e
        return item, None

    def update_item(self, item_id, cleaned, voice_file=None):
        item = self.client.menu.update(item_id, menu_item_fields(cleaned), files=self._voice_files(voice_file))
        logger.info(f"Updated menu item {item_id}")
        return item

    def delete_item(self, item_id):
        self.client.menu.delete(item_id)
        logger.info(f"Deleted menu item {item_id}")

    @staticmethod
    def _voice_files(voice_file):
        if voice_file is None or not voice_file.filename:
            return None
        return upload_files(voice_file, 'voice_file')

    # Images and voice of existing items

    def upload_image(self, item_id, image_file):
        """Upload one image; the four-image limit is checked before the upload"""
        item = self.client.menu.get(item_id) or {}
        check_image_limit(len(item.get('images') or []), self.config['MAX_ITEM_IMAGES'])
        return self.client.menu.upload_image(item_id, image_file)

    def delete_image(self, item_id, image_id):
        return self.client.menu.delete_image(item_id, image_id)

    def set_main_image(self, item_id, image_id):
        return self.client.menu.set_main_image(item_id, image_id)

    def upload_voice(self, item_id, voice_file):
        return self.client.menu.upload_voice(item_id, voice_file)
