import os
import uuid
from typing import TypedDict

from flask import current_app
from werkzeug.datastructures import FileStorage
from werkzeug.utils import secure_filename

from janseva.domain.errors import ValidationFailure

ALLOWED_EXTENSIONS = {'png', 'jpg', 'jpeg', 'gif', 'webp', 'mp4', 'mov', 'webm', 'pdf'}


class StoredFile(TypedDict):
    url: str
    size: int
    mime_type: str


def upload_folder() -> str:
    """Absolute upload directory; relative settings live under the instance folder."""
    folder = current_app.config.get('UPLOAD_FOLDER', 'uploads')
    if not os.path.isabs(folder):
        folder = os.path.join(current_app.instance_path, folder)
    return folder


def allowed_file(filename):
    return '.' in filename and filename.rsplit('.', 1)[1].lower() in ALLOWED_EXTENSIONS


def store_file(file: FileStorage) -> StoredFile:
    """
    Save an uploaded file under UPLOAD_FOLDER with a random name.

    The returned url is opaque to the CMS; section content only keeps it
    as a string.
    """
    if not file or not file.filename:
        raise ValidationFailure("No file provided", fields={"file": "required"})

    if not allowed_file(file.filename):
        raise ValidationFailure("File type not allowed", fields={"file": "unsupported type"})

    # secure_filename drops non-ASCII, so take the already validated extension from the raw name.
    ext = file.filename.rsplit('.', 1)[1].lower()
    unique_filename = f"{uuid.uuid4().hex}.{ext}"

    folder = upload_folder()
    os.makedirs(folder, exist_ok=True)
    file_path = os.path.join(folder, unique_filename)

    file.save(file_path)
    current_app.logger.info(
        "Stored upload %s as %s (%s)",
        secure_filename(file.filename) or ext, unique_filename, file.mimetype,
    )

    return {
        "url": f"/uploads/{unique_filename}",
        "size": os.path.getsize(file_path),
        "mime_type": file.mimetype or "application/octet-stream",
    }


def delete_file(file_url):
    """
    Deletes a previously stored file given its URL.
    """
    if not file_url:
        return False

    file_path = os.path.join(upload_folder(), os.path.basename(file_url))

    if os.path.exists(file_path):
        try:
            os.remove(file_path)
            return True
        except OSError as e:
            current_app.logger.error("Failed to delete file %s: %s", file_path, e)
            return False
    return False
