"""File references, status records and batched status checks."""
from .models import FileReference, FileStatus, FileStatusRecord, build_file_url
from .references import parse_file_reference, is_file_url
from .status_resolver import (
    FileStatusResolver,
    CHECK_FILES_SERVICE,
    decode_file_status,
    row_to_record,
)

__all__ = [
    'FileReference',
    'FileStatus',
    'FileStatusRecord',
    'build_file_url',
    'parse_file_reference',
    'is_file_url',
    'FileStatusResolver',
    'CHECK_FILES_SERVICE',
    'decode_file_status',
    'row_to_record',
]
