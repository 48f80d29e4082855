"""
Display helpers shared by the public pages and the admin dashboard
"""
from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP


def format_price(item):
    """Price label for cards and tables: the display string, else thousands as K"""
    if item.get('price_display'):
        return item['price_display']
    try:
        thousands = Decimal(str(item.get('price') or 0)) / 1000
    except ArithmeticError:
        return ''
    return f"{thousands.quantize(Decimal('1'), rounding=ROUND_HALF_UP)}K"


def resolve_url(path, file_url):
    if not path:
        return None
    return path if path.startswith('http') else file_url(path)


def item_images(item, file_url, placeholder):
    """Ordered images of an item, never empty

    Falls back to the legacy single `image_url`, then to the placeholder.
    """
    images = item.get('images') or []
    if images:
        return [
            {'id': img.get('id'), 'url': resolve_url(img.get('image_url'), file_url), 'is_main': bool(img.get('is_main'))}
            for img in images
        ]
    if item.get('image_url'):
        return [{'id': None, 'url': resolve_url(item['image_url'], file_url), 'is_main': True}]
    return [{'id': None, 'url': placeholder, 'is_main': True}]


def main_image(item, file_url, placeholder):
    images = item_images(item, file_url, placeholder)
    for image in images:
        if image['is_main']:
            return image['url']
    return images[0]['url']


def carousel_index(index, count):
    """Wrap an image index around both ends of the carousel"""
    if count <= 0:
        return 0
    try:
        return int(index) % count
    except (TypeError, ValueError):
        return 0


def gallery_from_menu(items, limit=12):
    """Gallery entries built from menu item images, captioned with the item name"""
    gallery = []
    for item in items:
        if item.get('images'):
            gallery.extend(
                {'id': img.get('id'), 'image_url': img.get('image_url'), 'caption': item.get('name')}
                for img in item['images']
            )
        elif item.get('image_url'):
            gallery.append({'id': item.get('id'), 'image_url': item['image_url'], 'caption': item.get('name')})
    return gallery[:limit]


def format_timestamp(value, fallback='-'):
    if not value:
        return fallback
    try:
        moment = datetime.fromisoformat(str(value).replace('Z', '+00:00'))
    except ValueError:
        return str(value)
    return moment.strftime('%d %b %Y %H:%M')
