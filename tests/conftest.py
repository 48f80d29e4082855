"""
Bakery Site - Test Configuration and Fixtures
"""
import copy

import pytest
from flask import g

from bakery_site import create_app
from bakery_site.config import TestingConfig
from bakery_site.core.api_client import ApiClient, ApiError

CATEGORIES = [
    {'id': 1, 'name': 'Roti'},
    {'id': 2, 'name': 'Kue'},
]

MENU_ITEMS = [
    {
        'id': 1, 'name': 'Roti Sobek', 'category_id': 1, 'category_name': 'Roti',
        'price': 25000, 'description': 'Roti sobek lembut', 'tag': 'Best Seller',
        'is_featured': False, 'voice_description': 'Roti sobek lembut dengan mentega',
        'images': [{'id': 11, 'image_url': '/uploads/menu/sobek.jpg', 'is_main': True}],
    },
    {
        'id': 2, 'name': 'Croissant', 'category_id': 1, 'category_name': 'Roti',
        'price': 18500, 'description': 'Croissant mentega', 'tag': 'Baru',
        'is_featured': True, 'voice_file': '/uploads/voice/croissant.mp3',
    },
    {
        'id': 3, 'name': 'Brownies', 'category_id': 2, 'category_name': 'Kue',
        'price': 30000, 'price_display': '30rb', 'description': 'Brownies coklat',
        'is_featured': False,
    },
]

SPECIALS = [{'id': 1, 'title': 'Promo Weekend', 'description': 'Diskon 10% setiap Sabtu'}]

FAQS = [{'id': 1, 'question': 'Apakah bisa pesan online?', 'answer': 'Bisa lewat WhatsApp.'}]

ADMINS = [
    {
        'id': 1, 'username': 'admin', 'name': 'Admin Zelan', 'role': 'admin',
        'is_active': True, 'created_at': '2024-01-15T10:30:00Z', 'last_login': None,
    },
    {
        'id': 2, 'username': 'kasir', 'name': 'Kasir', 'role': 'admin',
        'is_active': False, 'created_at': '2024-02-01T08:00:00Z', 'last_login': '2024-03-01T09:15:00Z',
    },
]

STATS = {'totalItems': 3, 'totalCategories': 2, 'featuredItems': 1, 'voiceEnabled': 2}


class FakeResource:
    """In-memory stand-in for one REST resource"""

    def __init__(self, records=()):
        self.records = {str(r['id']): copy.deepcopy(r) for r in records}
        self.calls = []
        self.fail = None
        self.next_id = 100

    def _guard(self, *call):
        self.calls.append(call)
        if self.fail is not None:
            raise self.fail

    def _find(self, record_id):
        record = self.records.get(str(record_id))
        if record is None:
            raise ApiError('Not found', status_code=404, payload={'message': 'Not found'})
        return record

    def list(self, **params):
        self._guard('list', params)
        return list(self.records.values())

    def get(self, record_id):
        self._guard('get', record_id)
        return self.records.get(str(record_id))

    def create(self, data, files=None):
        self._guard('create', data, files)
        record = dict(data, id=self.next_id)
        self.next_id += 1
        self.records[str(record['id'])] = record
        return record

    def update(self, record_id, data, files=None):
        self._guard('update', record_id, data, files)
        record = self._find(record_id)
        record.update(data)
        return record

    def delete(self, record_id):
        self._guard('delete', record_id)
        self._find(record_id)
        del self.records[str(record_id)]


class FakeMenu(FakeResource):

    def __init__(self, records=()):
        super().__init__(records)
        self.uploads = []
        self.fail_upload_after = None

    def list(self, available=None):
        return super().list(available=available)

    def upload_image(self, item_id, image_file):
        self._guard('upload_image', item_id)
        if self.fail_upload_after is not None and len(self.uploads) >= self.fail_upload_after:
            raise ApiError('Upload failed', status_code=500)
        record = self._find(item_id)
        self.uploads.append((str(item_id), image_file.filename, image_file.read()))
        images = record.setdefault('images', [])
        images.append({
            'id': 1000 + len(self.uploads),
            'image_url': f'/uploads/menu/{image_file.filename}',
            'is_main': not images,
        })
        return images[-1]

    def delete_image(self, item_id, image_id):
        self._guard('delete_image', item_id, image_id)
        record = self._find(item_id)
        record['images'] = [img for img in record.get('images', []) if str(img['id']) != str(image_id)]

    def set_main_image(self, item_id, image_id):
        self._guard('set_main_image', item_id, image_id)
        for img in self._find(item_id).get('images', []):
            img['is_main'] = str(img['id']) == str(image_id)

    def upload_voice(self, item_id, voice_file):
        self._guard('upload_voice', item_id, voice_file.filename)
        record = self._find(item_id)
        record['voice_file'] = f'/uploads/voice/{voice_file.filename}'
        return record


class FakeCategories(FakeResource):

    def __init__(self, records, menu):
        super().__init__(records)
        self.menu = menu

    def delete(self, record_id):
        in_use = any(str(item.get('category_id')) == str(record_id) for item in self.menu.records.values())
        if in_use:
            self.calls.append(('delete', record_id))
            raise ApiError('Category has menu items', status_code=400)
        super().delete(record_id)


class FakeAuth:

    def __init__(self, admins):
        self.admins_list = copy.deepcopy(admins)
        self.passwords = {'admin': 'rahasia123'}
        self.calls = []
        self.fail = None

    def _guard(self, *call):
        self.calls.append(call)
        if self.fail is not None:
            raise self.fail

    def login(self, username, password):
        self._guard('login', username)
        if self.passwords.get(username) != password:
            raise ApiError('Invalid credentials', status_code=401, payload={'message': 'Invalid credentials'})
        user = next(a for a in self.admins_list if a['username'] == username)
        return {'success': True, 'data': {'token': 'token-123', 'user': user}}

    def logout(self):
        self._guard('logout')

    def register(self, data):
        self._guard('register', data)
        if any(a['username'] == data['username'] for a in self.admins_list):
            raise ApiError('Username already exists', status_code=400,
                           payload={'message': 'Username already exists'})
        admin = {'id': len(self.admins_list) + 1, 'username': data['username'], 'name': data['name'],
                 'role': 'admin', 'is_active': True, 'created_at': '2024-05-01T12:00:00Z', 'last_login': None}
        self.admins_list.append(admin)
        self.passwords[data['username']] = data['password']
        return admin

    def change_password(self, current_password, new_password):
        self._guard('change_password', current_password, new_password)
        if current_password != self.passwords['admin']:
            raise ApiError('Current password is incorrect', status_code=400,
                           payload={'message': 'Current password is incorrect'})
        self.passwords['admin'] = new_password

    def admins(self):
        self._guard('admins')
        return self.admins_list


class FakeStats:

    def __init__(self, stats):
        self.stats = dict(stats)
        self.fail = None

    def get(self):
        if self.fail is not None:
            raise self.fail
        return self.stats


class FakeApiClient(ApiClient):
    """ApiClient whose resources live in memory; file_url is the real one"""

    def __init__(self):
        super().__init__('http://api.test/api', uploads_url='http://uploads.test')
        self.menu = FakeMenu(MENU_ITEMS)
        self.categories = FakeCategories(CATEGORIES, self.menu)
        self.specials = FakeResource(SPECIALS)
        self.faqs = FakeResource(FAQS)
        self.gallery = FakeResource()
        self.auth = FakeAuth(ADMINS)
        self.stats = FakeStats(STATS)

    def fail_everything(self, error=None):
        error = error or ApiError('API not reachable: connection refused')
        for resource in (self.menu, self.categories, self.specials, self.faqs, self.auth, self.stats):
            resource.fail = error


@pytest.fixture
def fake_api():
    """Fresh in-memory API for each test"""
    return FakeApiClient()


@pytest.fixture
def make_app(tmp_path, fake_api):
    """Build the site app on top of the fake API"""
    def factory(**overrides):
        settings = dict(STAGING_DIR=str(tmp_path / 'staging'), **overrides)
        config = type('Config', (TestingConfig,), settings)
        app = create_app(config)

        @app.before_request
        def use_fake_api():
            g.api_client = fake_api

        return app
    return factory


@pytest.fixture
def app(make_app):
    return make_app()


@pytest.fixture
def staging(app):
    return app.extensions['image_staging']


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin_client(client):
    """Test client with a logged-in admin session"""
    with client.session_transaction() as sess:
        sess['auth_token'] = 'token-123'
        sess['is_authenticated'] = True
        sess['user'] = {'id': 1, 'username': 'admin', 'name': 'Admin Zelan'}
    return client


def flashes(client):
    """Flash messages waiting in the client's session"""
    with client.session_transaction() as sess:
        return [message for _, message in sess.get('_flashes', [])]


@pytest.fixture
def get_flashes():
    return flashes
