"""
REST API client
Single module wrapping every HTTP call the site makes to the bakery API
"""
import logging

import requests

logger = logging.getLogger(__name__)

# Stored in place of a real token when the login response carries none
PLACEHOLDER_TOKEN = 'authenticated'


class ApiError(Exception):
    """Raised for transport failures and non-2xx API responses"""

    def __init__(self, message, status_code=None, payload=None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.payload = payload or {}


def upload_files(file_storage, field_name):
    """Convert a werkzeug FileStorage into a requests `files` mapping"""
    return {field_name: (file_storage.filename, file_storage.stream, file_storage.mimetype)}


class ApiClient:
    """HTTP client for the bakery REST API"""

    def __init__(self, base_url, uploads_url='', token=None, timeout=10, session=None):
        self.base_url = base_url.rstrip('/')
        self.uploads_url = (uploads_url or '').rstrip('/')
        self.token = token
        self.timeout = timeout
        self.session = session or requests.Session()

        self.categories = CategoriesApi(self)
        self.menu = MenuApi(self)
        self.specials = SpecialsApi(self)
        self.faqs = FaqApi(self)
        self.gallery = GalleryApi(self)
        self.auth = AuthApi(self)
        self.stats = StatsApi(self)

    def file_url(self, path):
        """Get the full URL for an uploaded file"""
        if not path:
            return None
        if path.startswith('http'):
            return path
        return f"{self.uploads_url}/{path.lstrip('/')}"

    def _headers(self):
        headers = {'Accept': 'application/json'}
        if self.token and self.token != PLACEHOLDER_TOKEN:
            headers['Authorization'] = f'Bearer {self.token}'
        return headers

    def request(self, method, path, params=None, json=None, data=None, files=None):
        """Send a request and return the decoded JSON body

        Raises ApiError when the API cannot be reached or answers with an
        error status. The error message is taken from the body's `message`.
        """
        url = f'{self.base_url}{path}'
        try:
            response = self.session.request(
                method,
                url,
                params=params,
                json=json,
                data=data,
                files=files,
                headers=self._headers(),
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            logger.error(f"{method} {url} failed: {e}")
            raise ApiError(f'API not reachable: {e}') from e

        body = self._decode(response)
        if not response.ok:
            message = body.get('message') or f'HTTP {response.status_code}'
            logger.warning(f"{method} {url} -> {response.status_code}: {message}")
            raise ApiError(message, status_code=response.status_code, payload=body)

        logger.debug(f"{method} {url} -> {response.status_code}")
        return body

    @staticmethod
    def _decode(response):
        if not response.content:
            return {}
        try:
            body = response.json()
        except ValueError:
            return {}
        return body if isinstance(body, dict) else {'data': body}

    def get(self, path, **kwargs):
        return self.request('GET', path, **kwargs)

    def post(self, path, **kwargs):
        return self.request('POST', path, **kwargs)

    def put(self, path, **kwargs):
        return self.request('PUT', path, **kwargs)

    def patch(self, path, **kwargs):
        return self.request('PATCH', path, **kwargs)

    def delete(self, path, **kwargs):
        return self.request('DELETE', path, **kwargs)


class ResourceApi:
    """CRUD calls for one JSON resource"""

    path = ''

    def __init__(self, client):
        self.client = client

    def list(self, **params):
        body = self.client.get(self.path, params=params or None)
        return body.get('data') or []

    def get(self, record_id):
        return self.client.get(f'{self.path}/{record_id}').get('data')

    def create(self, data):
        return self.client.post(self.path, json=data).get('data')

    def update(self, record_id, data):
        return self.client.put(f'{self.path}/{record_id}', json=data).get('data')

    def delete(self, record_id):
        return self.client.delete(f'{self.path}/{record_id}').get('data')


class MultipartResourceApi(ResourceApi):
    """Resource whose create and update calls are multipart form posts"""

    def create(self, fields, files=None):
        return self.client.post(self.path, data=fields, files=files).get('data')

    def update(self, record_id, fields, files=None):
        return self.client.put(f'{self.path}/{record_id}', data=fields, files=files).get('data')


class CategoriesApi(ResourceApi):
    path = '/categories'


class SpecialsApi(ResourceApi):
    path = '/specials'


class FaqApi(ResourceApi):
    path = '/faqs'


class GalleryApi(MultipartResourceApi):
    path = '/gallery'


class MenuApi(MultipartResourceApi):
    path = '/menu'

    def list(self, available=None):
        params = {'available': available} if available is not None else {}
        return super().list(**params)

    def by_category(self):
        return self.client.get(f'{self.path}/by-category').get('data') or []

    def upload_voice(self, item_id, voice_file):
        return self.client.post(f'{self.path}/{item_id}/voice',
                                files=upload_files(voice_file, 'voice_file')).get('data')

    def upload_image(self, item_id, image_file):
        return self.client.post(f'{self.path}/{item_id}/images',
                                files=upload_files(image_file, 'image')).get('data')

    def delete_image(self, item_id, image_id):
        return self.client.delete(f'{self.path}/{item_id}/images/{image_id}').get('data')

    def set_main_image(self, item_id, image_id):
        return self.client.patch(f'{self.path}/{item_id}/images/{image_id}/main').get('data')


class AuthApi:
    path = '/auth'

    def __init__(self, client):
        self.client = client

    def login(self, username, password):
        """Returns the whole body; the token may sit under data or at the top level"""
        return self.client.post(f'{self.path}/login', json={'username': username, 'password': password})

    def logout(self):
        return self.client.post(f'{self.path}/logout')

    def register(self, data):
        return self.client.post(f'{self.path}/register', json=data).get('data')

    def change_password(self, current_password, new_password):
        return self.client.put(f'{self.path}/change-password', json={
            'currentPassword': current_password,
            'newPassword': new_password,
        }).get('data')

    def admins(self):
        return self.client.get(f'{self.path}/admins').get('data') or []


class StatsApi:
    path = '/stats'

    def __init__(self, client):
        self.client = client

    def get(self):
        return self.client.get(self.path).get('data') or {}
