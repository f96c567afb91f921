"""Lenient parsing of RapidShare file links."""
import re
from typing import Union

from .models import FileReference

FILE_URL_PATTERN = re.compile(r'\Ahttps?://[^/\s]+/files/([0-9]+)/([^/?#]+)(?:[?#].*)?\Z', re.IGNORECASE)
EMPTY_REFERENCE = FileReference('', '')


def parse_file_reference(url: Union[str, FileReference, None]) -> FileReference:
    """
    Extracts file id and file name from a RapidShare link.

    Never raises: anything that is not a file link yields an empty reference.

    Example:
        >>> parse_file_reference('https://rapidshare.com/files/829628035/HornyRhinos.jpg')
        FileReference(file_id='829628035', file_name='HornyRhinos.jpg')
    """
    if isinstance(url, FileReference):
        return url
    if not isinstance(url, str):
        return EMPTY_REFERENCE

    match = FILE_URL_PATTERN.match(url.strip())
    if not match:
        return EMPTY_REFERENCE
    return FileReference(match.group(1), match.group(2))


def is_file_url(url: str) -> bool:
    """Checks whether a string is a RapidShare file link."""
    return not parse_file_reference(url).is_empty
