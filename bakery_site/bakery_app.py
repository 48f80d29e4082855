"""
Bakery Site
Public storefront and admin dashboard on top of the bakery REST API
"""
import logging
import os

from flask import Flask

from .config.settings import BakeryConfig
from .core import auth
from .core.limiter import limiter
from .core.monitoring import ApiMonitor
from .core.presentation import format_price, format_timestamp
from .core.staging import ImageStaging
from .routes.main_routes import main_bp

from .components.storefront import init_storefront
from .components.menu_detail import init_menu_detail
from .components.admin_auth import init_admin_auth
from .components.menu_admin import init_menu_admin
from .components.category_admin import init_category_admin
from .components.faq_admin import init_faq_admin
from .components.account_admin import init_account_admin

logger = logging.getLogger(__name__)


class BakeryApp:
    """Main site application class"""

    def __init__(self):
        self.app = None
        self.monitor = None

    def create_app(self, config_object=BakeryConfig):
        """Create and configure Flask application"""
        package_dir = os.path.dirname(os.path.abspath(__file__))
        self.app = Flask(
            __name__,
            template_folder=os.path.join(package_dir, 'templates'),
            static_folder=os.path.join(package_dir, 'static'),
        )
        self.app.config.from_object(config_object)

        logging.basicConfig(level=self.app.config.get('LOG_LEVEL', 'INFO'))

        limiter.init_app(self.app)

        self.monitor = ApiMonitor(self.app.config['API_BASE_URL'])
        self.app.extensions['api_monitor'] = self.monitor
        self.app.extensions['image_staging'] = ImageStaging(
            self.app.config['STAGING_DIR'],
            max_images=self.app.config['MAX_ITEM_IMAGES'],
            max_age=self.app.permanent_session_lifetime.total_seconds(),
        )

        self._register_template_helpers()

        # Initialize components
        init_storefront(self.app)
        init_menu_detail(self.app)
        init_admin_auth(self.app)
        init_menu_admin(self.app)
        init_category_admin(self.app)
        init_faq_admin(self.app)
        init_account_admin(self.app)

        self.app.register_blueprint(main_bp)

        return self.app

    def _register_template_helpers(self):
        app = self.app
        app.add_template_filter(format_price, 'price')
        app.add_template_filter(format_timestamp, 'timestamp')

        @app.context_processor
        def inject_site():
            config = app.config
            return {
                'bakery': {
                    'name': config['BAKERY_NAME'],
                    'address': config['BAKERY_ADDRESS'],
                    'hours': config['BAKERY_HOURS'],
                    'phone': config['BAKERY_PHONE'],
                    'whatsapp_url': config['WHATSAPP_URL'],
                },
                'is_authenticated': auth.is_authenticated(),
                'current_user': auth.current_user(),
            }

    def run(self, host='0.0.0.0', port=8080):
        """Start the site"""
        status = self.monitor.check()
        logger.info("=" * 60)
        logger.info(f"{self.app.config['BAKERY_NAME']} site")
        logger.info(f"Starting on: http://localhost:{port}")
        logger.info(f"   - Storefront: http://localhost:{port}/")
        logger.info(f"   - Admin:      http://localhost:{port}/admin")
        logger.info(f"   - Health:     http://localhost:{port}/health")
        logger.info(f"REST API: {self.app.config['API_BASE_URL']} ({status['status']})")
        logger.info("=" * 60)

        self.app.run(host=host, port=port, debug=False)


def create_app(config_object=BakeryConfig):
    return BakeryApp().create_app(config_object)


def main():
    """Main entry point"""
    site = BakeryApp()
    site.create_app()
    site.run(port=int(os.environ.get('PORT', 8080)))


if __name__ == '__main__':
    main()
