"""
Image staging for menu items that do not exist yet

A new item's images are picked before the item has an id to upload them to.
They are buffered on disk in a batch directory and uploaded one by one once
the item has been created.
"""
import json
import logging
import shutil
import time
import uuid
from pathlib import Path

from werkzeug.datastructures import FileStorage
from werkzeug.utils import secure_filename

logger = logging.getLogger(__name__)

MANIFEST = 'manifest.json'


class StagingError(Exception):
    """Raised when an image cannot be staged"""


class ImageStaging:
    """Disk-backed batches of unsaved images, keyed by a random token"""

    def __init__(self, root_dir, max_images=4, max_age=None):
        self.root = Path(root_dir)
        self.max_images = max_images
        self.max_age = max_age

    def open_batch(self):
        self.prune()
        token = uuid.uuid4().hex
        batch = self.root / token
        batch.mkdir(parents=True, exist_ok=True)
        self._write_manifest(batch, [])
        return token

    def prune(self):
        """Remove batches untouched for longer than max_age seconds"""
        if not self.max_age or not self.root.is_dir():
            return 0
        cutoff = time.time() - self.max_age
        removed = 0
        for batch in self.root.iterdir():
            if batch.is_dir() and batch.stat().st_mtime < cutoff:
                shutil.rmtree(batch, ignore_errors=True)
                removed += 1
        if removed:
            logger.info(f"Pruned {removed} stale staging batch(es)")
        return removed

    def _batch_dir(self, token):
        # Tokens are generated here; anything else is treated as unknown
        if not token or not all(c in '0123456789abcdef' for c in token):
            return None
        batch = self.root / token
        return batch if batch.is_dir() else None

    def _read_manifest(self, batch):
        try:
            with open(batch / MANIFEST) as f:
                return json.load(f)
        except (OSError, ValueError):
            return []

    def _write_manifest(self, batch, entries):
        with open(batch / MANIFEST, 'w') as f:
            json.dump(entries, f)

    def entries(self, token):
        """Staged images in the order they were added; the first becomes main"""
        batch = self._batch_dir(token)
        return self._read_manifest(batch) if batch else []

    def add(self, token, file_storage):
        batch = self._batch_dir(token)
        if batch is None:
            raise StagingError('Image staging expired, please reopen the form')
        if file_storage is None or not file_storage.filename:
            raise StagingError('No image selected')

        entries = self._read_manifest(batch)
        if len(entries) >= self.max_images:
            raise StagingError(f'Maximum {self.max_images} images allowed')

        image_id = uuid.uuid4().hex[:12]
        filename = secure_filename(file_storage.filename) or 'image'
        stored_name = f'{image_id}_{filename}'
        file_storage.save(str(batch / stored_name))

        entry = {
            'id': image_id,
            'filename': filename,
            'stored_name': stored_name,
            'content_type': file_storage.mimetype or 'application/octet-stream',
        }
        entries.append(entry)
        self._write_manifest(batch, entries)
        logger.info(f"Staged image {filename} ({len(entries)}/{self.max_images})")
        return entry

    def remove(self, token, image_id):
        batch = self._batch_dir(token)
        if batch is None:
            return False
        entries = self._read_manifest(batch)
        remaining = [e for e in entries if e['id'] != image_id]
        if len(remaining) == len(entries):
            return False
        for entry in entries:
            if entry['id'] == image_id:
                (batch / entry['stored_name']).unlink(missing_ok=True)
        self._write_manifest(batch, remaining)
        return True

    def preview_path(self, token, image_id):
        batch = self._batch_dir(token)
        if batch is None:
            return None, None
        for entry in self._read_manifest(batch):
            if entry['id'] == image_id:
                path = batch / entry['stored_name']
                if path.exists():
                    return path, entry['content_type']
        return None, None

    def persist(self, token, client, item_id):
        """Upload every staged image to a newly created item, in order

        Each local file is removed right after its upload. Entries whose file
        has gone missing are skipped. An ApiError stops the loop; images not
        yet uploaded stay in the batch.
        """
        batch = self._batch_dir(token)
        if batch is None:
            return 0

        entries = self._read_manifest(batch)
        uploaded = 0
        for entry in list(entries):
            path = batch / entry['stored_name']
            if not path.exists():
                logger.warning(f"Staged image {entry['filename']} is missing, skipping it")
                entries.remove(entry)
                self._write_manifest(batch, entries)
                continue
            with open(path, 'rb') as stream:
                client.menu.upload_image(item_id, FileStorage(
                    stream=stream,
                    filename=entry['filename'],
                    content_type=entry['content_type'],
                ))
            path.unlink(missing_ok=True)
            entries.remove(entry)
            self._write_manifest(batch, entries)
            uploaded += 1

        self.discard(token)
        logger.info(f"Uploaded {uploaded} staged image(s) to menu item {item_id}")
        return uploaded

    def discard(self, token):
        batch = self._batch_dir(token)
        if batch is not None:
            shutil.rmtree(batch, ignore_errors=True)
