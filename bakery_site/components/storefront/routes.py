"""
Storefront Routes
Public home page and the fullscreen gallery viewer
"""
from flask import Blueprint, abort, current_app, render_template, request

from ...core.auth import api_client
from ...core.narration import item_narration
from ...core.presentation import main_image
from .service import StorefrontService, FAVOURITES

storefront_bp = Blueprint('storefront', __name__, template_folder='templates')


def _service():
    return StorefrontService(api_client(), current_app.config)


@storefront_bp.route('/')
def home():
    """Render the public home page"""
    service = _service()
    data = service.load()
    client = api_client()
    placeholder = current_app.config['PLACEHOLDER_IMAGE']

    category = request.args.get('category', FAVOURITES)
    menu = service.menu_page(data['menu_items'], category, request.args.get('page', 1))
    cards = [
        {
            'item': item,
            'image': main_image(item, client.file_url, placeholder),
            'narration': item_narration(item, client.file_url, current_app.config['SPEECH_RATE']),
        }
        for item in menu.items
    ]

    gallery = service.gallery(data['menu_items'])
    gallery_page = service.gallery_page(gallery, request.args.get('gallery_page', 1))

    return render_template(
        'storefront.html',
        categories=data['categories'],
        specials=data['specials'],
        faqs=data['faqs'],
        expanded_faq=request.args.get('faq'),
        category=category,
        menu=menu,
        cards=cards,
        gallery=gallery_page,
    )


@storefront_bp.route('/gallery/view/<int:index>')
def gallery_view(index):
    """Fullscreen view of one gallery image"""
    service = _service()
    gallery = service.gallery(service.load_menu())
    view = service.gallery_view(gallery, index)
    if view is None:
        abort(404)
    return render_template('gallery_view.html', view=view)


def init_storefront(app):
    """Initialize storefront component with Flask app"""
    app.register_blueprint(storefront_bp)
    return storefront_bp
