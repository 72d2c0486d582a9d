"""
Embedded Images
===============

Image and icon fields hold their picture inline: an uploaded file is turned into
a ``data:`` URL and stored as ordinary text. There is no blob storage step.
"""

import base64
import mimetypes

ALLOWED_EXTENSIONS = {'png', 'jpg', 'jpeg', 'gif', 'webp', 'svg', 'ico'}


def guess_content_type(filename):
    """Guess content type from extension"""
    ext = filename.rsplit('.', 1)[-1].lower() if '.' in filename else ''
    content_types = {
        'jpg': 'image/jpeg', 'jpeg': 'image/jpeg',
        'png': 'image/png', 'gif': 'image/gif', 'webp': 'image/webp',
        'svg': 'image/svg+xml', 'ico': 'image/x-icon',
    }
    if ext in content_types:
        return content_types[ext]
    return mimetypes.guess_type(filename)[0] or 'application/octet-stream'


def embed_file(file_bytes, filename):
    """Encode raw file bytes as a data URL.

    Args:
        file_bytes: Raw bytes of the selected file.
        filename: Original filename, used only to pick the content type.

    Returns:
        "data:<content-type>;base64,<payload>"
    """
    content_type = guess_content_type(filename or '')
    payload = base64.b64encode(file_bytes).decode('ascii')
    return f"data:{content_type};base64,{payload}"


def embed_upload(file_storage):
    """Convert a Werkzeug FileStorage from a multipart form into a data URL.

    Returns None when no file was selected.
    """
    if file_storage is None or not file_storage.filename:
        return None
    return embed_file(file_storage.read(), file_storage.filename)


def is_allowed_image(filename):
    ext = filename.rsplit('.', 1)[-1].lower() if '.' in filename else ''
    return ext in ALLOWED_EXTENSIONS
