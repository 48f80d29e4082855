"""
Form validation for the admin dashboard
Validators return (cleaned, errors); errors maps a field name to a message.
"""

MIN_PASSWORD_LENGTH = 6


class ValidationError(Exception):
    """Raised for local checks that stop a request before it reaches the API"""


def _text(form, name):
    return (form.get(name) or '').strip()


def _require(form, names, errors):
    cleaned = {}
    for name in names:
        cleaned[name] = _text(form, name)
        if not cleaned[name]:
            errors[name] = 'This field is required'
    return cleaned


def _checkbox(form, name):
    return _text(form, name).lower() in ('1', 'true', 'on', 'yes')


def validate_menu_item(form):
    errors = {}
    cleaned = _require(form, ('name', 'category_id', 'price', 'description'), errors)

    if 'price' not in errors:
        try:
            cleaned['price'] = int(cleaned['price'])
            if cleaned['price'] < 0:
                errors['price'] = 'Price cannot be negative'
        except ValueError:
            errors['price'] = 'Price must be a whole number'

    for name in ('price_display', 'tag', 'voice_description'):
        cleaned[name] = _text(form, name)
    cleaned['is_featured'] = _checkbox(form, 'is_featured')
    return cleaned, errors


def menu_item_fields(cleaned):
    """Multipart form fields for a menu item create/update call

    Empty values are left out and `image_url` is never sent; images are
    managed through their own endpoints.
    """
    fields = {}
    for key, value in cleaned.items():
        if key == 'image_url' or value is None or value == '':
            continue
        if isinstance(value, bool):
            value = 'true' if value else 'false'
        fields[key] = str(value)
    return fields


def validate_category(form):
    errors = {}
    cleaned = _require(form, ('name',), errors)
    return cleaned, errors


def validate_faq(form):
    errors = {}
    cleaned = _require(form, ('question', 'answer'), errors)
    return cleaned, errors


def validate_login(form):
    errors = {}
    cleaned = {'username': _text(form, 'username'), 'password': form.get('password') or ''}
    if not cleaned['username']:
        errors['username'] = 'This field is required'
    if not cleaned['password']:
        errors['password'] = 'This field is required'
    return cleaned, errors


def validate_registration(form):
    errors = {}
    cleaned = _require(form, ('name', 'username'), errors)
    cleaned['password'] = form.get('password') or ''
    if not cleaned['password']:
        errors['password'] = 'This field is required'
    return cleaned, errors


def validate_password_change(form):
    errors = {}
    cleaned = {name: form.get(name) or '' for name in ('current_password', 'new_password', 'confirm_password')}
    for name, value in cleaned.items():
        if not value:
            errors[name] = 'This field is required'
    if errors:
        return cleaned, errors

    if cleaned['new_password'] != cleaned['confirm_password']:
        errors['confirm_password'] = 'New passwords do not match'
    elif len(cleaned['new_password']) < MIN_PASSWORD_LENGTH:
        errors['new_password'] = f'New password must be at least {MIN_PASSWORD_LENGTH} characters'
    return cleaned, errors


def check_image_limit(count, max_images):
    if count >= max_images:
        raise ValidationError(f'Maximum {max_images} images allowed')


def first_error(errors):
    return next(iter(errors.values()), None)
