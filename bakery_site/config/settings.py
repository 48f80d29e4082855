"""
Bakery site configuration settings
"""
import os
import tempfile
from datetime import timedelta


class BakeryConfig:
    """Centralized configuration for the bakery site"""

    # Flask settings
    SECRET_KEY = os.environ.get('SECRET_KEY', 'your-secret-key-here-change-in-production')
    PERMANENT_SESSION_LIFETIME = timedelta(hours=8)

    # REST API
    API_BASE_URL = os.environ.get('API_BASE_URL', 'http://localhost:5000/api')
    UPLOADS_BASE_URL = os.environ.get('UPLOADS_BASE_URL', '')
    API_TIMEOUT = int(os.environ.get('API_TIMEOUT', 10))

    # Rate limiting
    RATELIMIT_STORAGE_URI = "memory://"
    RATELIMIT_DEFAULT = "100 per minute"
    LOGIN_RATE_LIMIT = os.environ.get('LOGIN_RATE_LIMIT', '10 per minute')

    # Unsaved image uploads for new menu items
    STAGING_DIR = os.environ.get('STAGING_DIR', os.path.join(tempfile.gettempdir(), 'bakery_staging'))
    MAX_ITEM_IMAGES = 4

    # Listing sizes
    MENU_PAGE_SIZE = 6
    GALLERY_PAGE_SIZE = 9    # 3x3 grid
    GALLERY_MAX_IMAGES = 12

    # Voice narration
    SPEECH_RATE = 0.9
    AUTOPLAY_DELAY_MS = 500

    PLACEHOLDER_IMAGE = 'https://images.unsplash.com/photo-1546069901-ba9599a7e63c?w=500&h=350&fit=crop'
    DEFAULT_GALLERY = [
        {'id': 1, 'image_url': 'https://images.unsplash.com/photo-1509440159596-0249088772ff?w=800&h=600&fit=crop', 'caption': 'Fresh Bread'},
        {'id': 2, 'image_url': 'https://images.unsplash.com/photo-1558961363-fa8fdf82db35?w=800&h=600&fit=crop', 'caption': 'Pastries'},
        {'id': 3, 'image_url': 'https://images.unsplash.com/photo-1486427944299-d1955d23e34d?w=800&h=600&fit=crop', 'caption': 'Cakes'},
        {'id': 4, 'image_url': 'https://images.unsplash.com/photo-1517433670267-08bbd4be890f?w=800&h=600&fit=crop', 'caption': 'Cupcakes'},
        {'id': 5, 'image_url': 'https://images.unsplash.com/photo-1464349095431-e9a21285b5f3?w=800&h=600&fit=crop', 'caption': 'Birthday Cake'},
        {'id': 6, 'image_url': 'https://images.unsplash.com/photo-1495147466023-ac5c588e2e94?w=800&h=600&fit=crop', 'caption': 'Bakery'},
    ]

    # Business details shown on the public site
    BAKERY_NAME = os.environ.get('BAKERY_NAME', 'Zelan Bakery')
    BAKERY_ADDRESS = os.environ.get('BAKERY_ADDRESS', 'Jl. Bung Tomo VII No. 5, Denpasar, Bali')
    BAKERY_HOURS = os.environ.get('BAKERY_HOURS', '08:00 - 20:00')
    BAKERY_PHONE = os.environ.get('BAKERY_PHONE', '0895-3854-55669')
    WHATSAPP_URL = os.environ.get('WHATSAPP_URL', 'https://wa.me/62895385455669')

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')


class TestingConfig(BakeryConfig):
    """Configuration used by the test suite"""
    TESTING = True
    SECRET_KEY = 'test-secret-key'
    API_BASE_URL = 'http://api.test/api'
    UPLOADS_BASE_URL = 'http://uploads.test'
    RATELIMIT_ENABLED = False
