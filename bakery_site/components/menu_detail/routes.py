"""
Menu Detail Routes
"""
from flask import Blueprint, current_app, jsonify, render_template, request

from ...core.auth import api_client
from .service import MenuDetailService

menu_detail_bp = Blueprint('menu_detail', __name__, template_folder='templates')


def _service():
    return MenuDetailService(api_client(), current_app.config)


@menu_detail_bp.route('/menu/<item_id>')
def detail(item_id):
    """Render a menu item page"""
    service = _service()
    item = service.load_item(item_id)
    if not item:
        return render_template('menu_not_found.html'), 404
    return render_template('menu_detail.html', **service.detail(item, request.args.get('image', 0)))


@menu_detail_bp.route('/api/menu/<item_id>/narration')
def api_narration(item_id):
    """Narration plan for an item, as played by narration.js"""
    service = _service()
    item = service.load_item(item_id)
    if not item:
        return jsonify({'error': 'Menu item not found'}), 404
    return jsonify(service.narration(item))


def init_menu_detail(app):
    """Initialize menu detail component with Flask app"""
    app.register_blueprint(menu_detail_bp)
    return menu_detail_bp
