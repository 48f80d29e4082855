"""
Menu Admin Routes
Menu dashboard, item create/edit/delete, item images and voice clips
"""
from flask import (Blueprint, abort, current_app, flash, redirect, render_template,
                   request, send_file, session, url_for)

from ...core.api_client import ApiError
from ...core.auth import api_client, login_required
from ...core.narration import plan_narration
from ...core.staging import StagingError
from ...core.validation import ValidationError, validate_menu_item
from .service import MenuAdminService

menu_admin_bp = Blueprint('menu_admin', __name__, template_folder='templates', url_prefix='/admin/menu')

FORM_FIELDS = ('name', 'category_id', 'price', 'price_display', 'description',
               'voice_description', 'tag', 'is_featured')


def _staging():
    return current_app.extensions['image_staging']


def _service():
    return MenuAdminService(api_client(), _staging(), current_app.config)


def _form_from_item(item):
    form = {name: item.get(name) for name in FORM_FIELDS}
    for name in ('price_display', 'voice_description', 'tag'):
        form[name] = form[name] or ''
    form['is_featured'] = bool(item.get('is_featured'))
    return form


def _form_from_request():
    form = {name: request.form.get(name, '') for name in FORM_FIELDS}
    form['is_featured'] = 'is_featured' in request.form
    return form


def _render_form(service, form, item=None, errors=None, status=200):
    """Render the item form for a new item (item is None) or an existing one"""
    client = service.client
    staging_token = session.get('staging_token')
    staged = [] if item else _staging().entries(staging_token)
    images = service.images_for(item) if item else []
    return render_template(
        'menu_item_form.html',
        form=form,
        item=item,
        errors=errors or {},
        categories=service.load_categories(),
        images=images,
        staged=staged,
        max_images=current_app.config['MAX_ITEM_IMAGES'],
        can_add_image=len(images if item else staged) < current_app.config['MAX_ITEM_IMAGES'],
        narration=plan_narration(
            item.get('voice_file') if item else None,
            form.get('voice_description'),
            client.file_url,
            rate=current_app.config['SPEECH_RATE'],
        ),
        voice_file_name=(item.get('voice_file') or '').split('/')[-1] if item else '',
        active_tab='menu-items',
    ), status


@menu_admin_bp.route('')
@login_required
def dashboard():
    """Menu and category management tab"""
    service = _service()
    data = service.dashboard(service.resolve_filters(request.args))
    if data['error']:
        flash(data['error'], 'error')
    return render_template('menu_dashboard.html', active_tab='menu-items', **data)


@menu_admin_bp.route('/new', methods=['GET', 'POST'])
@login_required
def new_item():
    """Create a menu item; images picked here are staged until it exists"""
    service = _service()
    staging = _staging()

    if request.method == 'GET':
        staging.discard(session.get('staging_token'))
        session['staging_token'] = staging.open_batch()
        categories = service.load_categories()
        form = {name: '' for name in FORM_FIELDS}
        form['is_featured'] = False
        form['category_id'] = categories[0]['id'] if categories else ''
        return _render_form(service, form)

    token = session.get('staging_token')
    if not token:
        token = session['staging_token'] = staging.open_batch()

    action = request.form.get('action', 'save')
    if action == 'stage_image':
        try:
            staging.add(token, request.files.get('image'))
        except StagingError as e:
            flash(str(e), 'error')
        return _render_form(service, _form_from_request())

    if action.startswith('unstage:'):
        staging.remove(token, action.split(':', 1)[1])
        return _render_form(service, _form_from_request())

    cleaned, errors = validate_menu_item(request.form)
    if errors:
        return _render_form(service, _form_from_request(), errors=errors, status=400)

    try:
        item, upload_error = service.create_item(cleaned, request.files.get('voice_file'), token)
    except ApiError:
        flash('Failed to save menu item', 'error')
        return _render_form(service, _form_from_request())

    staging.discard(session.pop('staging_token', None))
    if isinstance(upload_error, StagingError):
        flash('Menu item created, but its images could not be uploaded', 'error')
        return redirect(url_for('menu_admin.dashboard'))
    if upload_error:
        flash('Menu item created, but some images failed to upload', 'error')
        return redirect(url_for('menu_admin.edit_item', item_id=item['id']))

    flash('Menu item created successfully', 'success')
    return redirect(url_for('menu_admin.dashboard'))


@menu_admin_bp.route('/new/cancel', methods=['POST'])
@login_required
def cancel_new_item():
    _staging().discard(session.pop('staging_token', None))
    return redirect(url_for('menu_admin.dashboard'))


@menu_admin_bp.route('/staging/<image_id>')
@login_required
def staged_preview(image_id):
    """Serve a staged image so the new item form can preview it"""
    path, content_type = _staging().preview_path(session.get('staging_token'), image_id)
    if path is None:
        abort(404)
    return send_file(path, mimetype=content_type)


@menu_admin_bp.route('/<item_id>/edit', methods=['GET', 'POST'])
@login_required
def edit_item(item_id):
    service = _service()
    try:
        item = service.load_item(item_id)
    except ApiError:
        flash('Failed to load item details', 'error')
        return redirect(url_for('menu_admin.dashboard'))
    if not item:
        abort(404)

    if request.method == 'GET':
        return _render_form(service, _form_from_item(item), item=item)

    cleaned, errors = validate_menu_item(request.form)
    if errors:
        return _render_form(service, _form_from_request(), item=item, errors=errors, status=400)

    try:
        service.update_item(item_id, cleaned, request.files.get('voice_file'))
    except ApiError:
        flash('Failed to save menu item', 'error')
        return _render_form(service, _form_from_request(), item=item)

    flash('Menu item updated successfully', 'success')
    return redirect(url_for('menu_admin.dashboard'))


@menu_admin_bp.route('/<item_id>/delete', methods=['POST'])
@login_required
def delete_item(item_id):
    try:
        _service().delete_item(item_id)
        flash('Menu item deleted', 'success')
    except ApiError:
        flash('Failed to delete item', 'error')
    return redirect(url_for('menu_admin.dashboard'))


@menu_admin_bp.route('/<item_id>/images', methods=['POST'])
@login_required
def upload_image(item_id):
    image = request.files.get('image')
    if image is None or not image.filename:
        flash('No image selected', 'error')
        return redirect(url_for('menu_admin.edit_item', item_id=item_id))
    try:
        _service().upload_image(item_id, image)
        flash('Image uploaded', 'success')
    except ValidationError as e:
        flash(str(e), 'error')
    except ApiError:
        flash('Failed to upload image', 'error')
    return redirect(url_for('menu_admin.edit_item', item_id=item_id))


@menu_admin_bp.route('/<item_id>/images/<image_id>/delete', methods=['POST'])
@login_required
def delete_image(item_id, image_id):
    try:
        _service().delete_image(item_id, image_id)
        flash('Image deleted', 'success')
    except ApiError:
        flash('Failed to delete image', 'error')
    return redirect(url_for('menu_admin.edit_item', item_id=item_id))


@menu_admin_bp.route('/<item_id>/images/<image_id>/main', methods=['POST'])
@login_required
def set_main_image(item_id, image_id):
    try:
        _service().set_main_image(item_id, image_id)
        flash('Main image updated', 'success')
    except ApiError:
        flash('Failed to set main image', 'error')
    return redirect(url_for('menu_admin.edit_item', item_id=item_id))


@menu_admin_bp.route('/<item_id>/voice', methods=['POST'])
@login_required
def upload_voice(item_id):
    voice = request.files.get('voice_file')
    if voice is None or not voice.filename:
        flash('No voice file selected', 'error')
        return redirect(url_for('menu_admin.edit_item', item_id=item_id))
    try:
        _service().upload_voice(item_id, voice)
        flash('Voice clip uploaded', 'success')
    except ApiError:
        flash('Failed to upload voice clip', 'error')
    return redirect(url_for('menu_admin.edit_item', item_id=item_id))


def init_menu_admin(app):
    """Initialize menu admin component with Flask app"""
    app.register_blueprint(menu_admin_bp)
    return menu_admin_bp
