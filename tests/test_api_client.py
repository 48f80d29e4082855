import io
import json
from unittest import mock

import pytest
import requests
from werkzeug.datastructures import FileStorage

from bakery_site.core.api_client import PLACEHOLDER_TOKEN, ApiClient, ApiError


def make_response(status_code=200, body=None, raw=None):
    response = requests.Response()
    response.status_code = status_code
    if raw is not None:
        response._content = raw
    else:
        response._content = json.dumps(body).encode() if body is not None else b''
    return response


@pytest.fixture
def session():
    return mock.Mock(spec=requests.Session)


def make_client(session, token=None):
    return ApiClient('http://api.test/api/', uploads_url='http://uploads.test/', token=token, session=session)


def test_list_returns_data_array(session):
    """Test that a list call unwraps the data envelope"""
    session.request.return_value = make_response(body={'success': True, 'data': [{'id': 1, 'name': 'Roti'}]})
    client = make_client(session)

    assert client.categories.list() == [{'id': 1, 'name': 'Roti'}]

    args, kwargs = session.request.call_args
    assert args == ('GET', 'http://api.test/api/categories')
    assert kwargs['params'] is None
    assert kwargs['headers'] == {'Accept': 'application/json'}
    assert kwargs['timeout'] == 10


def test_list_without_data_is_empty(session):
    session.request.return_value = make_response(body={'success': True})
    assert make_client(session).faqs.list() == []


def test_bare_array_body_is_treated_as_data(session):
    session.request.return_value = make_response(body=[{'id': 1}])
    assert make_client(session).specials.list() == [{'id': 1}]


def test_bearer_token_is_attached(session):
    session.request.return_value = make_response(body={'data': []})
    make_client(session, token='token-123').menu.list()

    headers = session.request.call_args[1]['headers']
    assert headers['Authorization'] == 'Bearer token-123'


def test_placeholder_token_is_not_sent(session):
    session.request.return_value = make_response(body={'data': []})
    make_client(session, token=PLACEHOLDER_TOKEN).menu.list()

    assert 'Authorization' not in session.request.call_args[1]['headers']


def test_error_message_comes_from_body(session):
    """Test that a non-2xx response raises ApiError with the API message"""
    session.request.return_value = make_response(400, {'success': False, 'message': 'Category has menu items'})

    with pytest.raises(ApiError) as exc_info:
        make_client(session).categories.delete(1)

    assert exc_info.value.message == 'Category has menu items'
    assert exc_info.value.status_code == 400
    assert exc_info.value.payload['success'] is False


def test_error_without_body_uses_status(session):
    session.request.return_value = make_response(500, raw=b'<html>Internal Server Error</html>')

    with pytest.raises(ApiError) as exc_info:
        make_client(session).stats.get()

    assert exc_info.value.message == 'HTTP 500'
    assert exc_info.value.payload == {}


def test_unreachable_api_raises_api_error(session):
    session.request.side_effect = requests.exceptions.ConnectionError('connection refused')

    with pytest.raises(ApiError) as exc_info:
        make_client(session).menu.get(1)

    assert exc_info.value.message.startswith('API not reachable')
    assert exc_info.value.status_code is None


def test_menu_list_passes_availability(session):
    session.request.return_value = make_response(body={'data': []})
    make_client(session).menu.list(available='all')

    assert session.request.call_args[1]['params'] == {'available': 'all'}


def test_menu_create_is_multipart(session):
    session.request.return_value = make_response(201, {'data': {'id': 7}})
    fields = {'name': 'Bolu', 'price': '20000'}

    assert make_client(session).menu.create(fields) == {'id': 7}

    args, kwargs = session.request.call_args
    assert args == ('POST', 'http://api.test/api/menu')
    assert kwargs['data'] == fields
    assert kwargs['json'] is None


def test_upload_image_sends_image_field(session):
    session.request.return_value = make_response(201, {'data': {'id': 21}})
    image = FileStorage(stream=io.BytesIO(b'jpeg'), filename='bolu.jpg', content_type='image/jpeg')

    make_client(session).menu.upload_image(7, image)

    args, kwargs = session.request.call_args
    assert args == ('POST', 'http://api.test/api/menu/7/images')
    filename, _, mimetype = kwargs['files']['image']
    assert (filename, mimetype) == ('bolu.jpg', 'image/jpeg')


def test_set_main_image_patches(session):
    session.request.return_value = make_response(body={'data': None})
    make_client(session).menu.set_main_image(7, 21)

    args = session.request.call_args[0]
    assert args == ('PATCH', 'http://api.test/api/menu/7/images/21/main')


def test_change_password_payload(session):
    session.request.return_value = make_response(body={'success': True})
    make_client(session, token='token-123').auth.change_password('lama123', 'baru456')

    args, kwargs = session.request.call_args
    assert args == ('PUT', 'http://api.test/api/auth/change-password')
    assert kwargs['json'] == {'currentPassword': 'lama123', 'newPassword': 'baru456'}


def test_login_returns_whole_body(session):
    body = {'success': True, 'token': 'top-level-token'}
    session.request.return_value = make_response(body=body)

    assert make_client(session).auth.login('admin', 'rahasia123') == body


def test_file_url():
    client = ApiClient('http://api.test/api', uploads_url='http://uploads.test/', session=mock.Mock())

    assert client.file_url('/uploads/menu/roti.jpg') == 'http://uploads.test/uploads/menu/roti.jpg'
    assert client.file_url('uploads/voice/a.mp3') == 'http://uploads.test/uploads/voice/a.mp3'
    assert client.file_url('https://cdn.test/x.jpg') == 'https://cdn.test/x.jpg'
    assert client.file_url('') is None
    assert client.file_url(None) is None
