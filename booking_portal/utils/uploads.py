"""Disk storage for files uploaded with booking messages"""
import logging
import os
import random
import time
from functools import wraps
from http import HTTPStatus
from flask import request, current_app
from werkzeug.utils import secure_filename
from booking_portal.utils.responses import ServiceResponse, handle_service_response

logger = logging.getLogger(__name__)

MESSAGE_ATTACHMENTS_DIR = 'message-attachments'

ALLOWED_MIME_TYPES = {
    'image/jpeg',
    'image/png',
    'image/gif',
    'image/webp',
    'application/pdf',
    'application/msword',
    'application/vnd.openxmlformats-officedocument.wordprocessingml.document',
    'application/vnd.ms-excel',
    'application/vnd.openxmlformats-officedocument.spreadsheetml.sheet',
    'text/plain',
    'text/csv',
}

class UploadError(Exception):
    """Raised when an upload breaks the count, size or type rules"""

    def __init__(self, message, status_code=HTTPStatus.BAD_REQUEST):
        super().__init__(message)
        self.message = message
        self.status_code = status_code

def get_upload_dir():
    upload_folder = current_app.config.get('UPLOAD_FOLDER', 'uploads')
    upload_dir = os.path.abspath(os.path.join(upload_folder, MESSAGE_ATTACHMENTS_DIR))
    os.makedirs(upload_dir, exist_ok=True)
    return upload_dir

def unique_filename(original_name):
    """
    Build ``<basename>-<epoch millis>-<random>.<ext>`` from the client's file name
    so that repeated uploads of the same file never collide.
    """
    base, ext = os.path.splitext(original_name or '')
    base = secure_filename(base) or 'file'
    ext = secure_filename(ext.lstrip('.'))
    suffix = f"{int(time.time() * 1000)}-{random.randint(0, 10**9)}"
    return f"{base}-{suffix}.{ext}" if ext else f"{base}-{suffix}"

def _stream_size(file):
    stream = file.stream
    stream.seek(0, os.SEEK_END)
    size = stream.tell()
    stream.seek(0)
    return size

def check_files(files):
    """Validate count, MIME type and size of every file before anything is written"""
    max_files = current_app.config.get('MAX_UPLOAD_FILES', 5)
    max_size = current_app.config.get('MAX_UPLOAD_FILE_SIZE', 10 * 1024 * 1024)

    if len(files) > max_files:
        raise UploadError(f'Too many files. At most {max_files} files are allowed')

    sizes = []
    for file in files:
        if file.mimetype not in ALLOWED_MIME_TYPES:
            raise UploadError(f'File type {file.mimetype} is not allowed')
        size = _stream_size(file)
        if size > max_size:
            raise UploadError(f'File {file.filename} exceeds the {max_size // (1024 * 1024)}MB limit')
        sizes.append(size)
    return sizes

def save_files(files):
    """Write validated files to the uploads directory and return their metadata"""
    sizes = check_files(files)
    upload_dir = get_upload_dir()

    saved = []
    try:
        for file, size in zip(files, sizes):
            file_path = os.path.join(upload_dir, unique_filename(file.filename))
            file.save(file_path)
            saved.append({
                'file_name': file.filename,
                'file_path': file_path,
                'file_size': size,
                'mime_type': file.mimetype
            })
    except OSError:
        discard_files(saved)
        raise
    return saved

def discard_files(saved):
    """Remove files written for a request whose message was never stored"""
    for item in saved:
        try:
            os.remove(item['file_path'])
        except OSError as e:
            logger.warning(f"Could not remove upload {item['file_path']}: {e}")

def accept_uploads(field='files'):
    """
    Decorator storing the multipart ``field`` files to disk before the view runs.

    The saved file metadata is available as ``request.uploaded_files`` (empty
    list for JSON requests or requests without files).
    """
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            files = [file for file in request.files.getlist(field) if file and file.filename]
            try:
                request.uploaded_files = save_files(files) if files else []
            except UploadError as e:
                return handle_service_response(ServiceResponse.failure(e.message, None, e.status_code))
            return f(*args, **kwargs)
        return decorated_function
    return decorator
