"""Batched file status checks."""
from typing import Iterable, List, Optional, Protocol, Union

from .models import FileReference, FileStatus, FileStatusRecord
from .references import parse_file_reference
from ..api.errors import CallerError
from ..api.request import ResponseShape, ParsedResponse
from ..logging import get_logger

CHECK_FILES_SERVICE = 'checkfiles'

STATUS_OK_CODES = frozenset({1, 2, 6})
STATUS_ERROR_CODES = frozenset({0, 3, 4, 5})


class ServiceCaller(Protocol):
    """Anything that can perform a signed service call."""

    def call(self, service: str, params=None,
             shape: Union[ResponseShape, str, None] = ResponseShape.RAW) -> ParsedResponse:
        ...


def decode_file_status(status_code: Optional[int]) -> FileStatus:
    """
    Converts a ``checkfiles`` status code to a FileStatus.

    1 anonymous download, 2 TrafficShare direct, 6 TrafficShare with login
    are OK. 0 not found, 3 server down, 4 illegal, 5 anonymous locked are
    errors. Everything else is unknown.
    """
    if status_code in STATUS_OK_CODES:
        return FileStatus.OK
    if status_code in STATUS_ERROR_CODES:
        return FileStatus.ERROR
    return FileStatus.UNKNOWN


def _parse_status_code(value: Optional[str]) -> Optional[int]:
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _column(row: List[str], index: int) -> Optional[str]:
    return row[index] if index < len(row) else None


def row_to_record(row: List[str]) -> FileStatusRecord:
    """Maps one ``checkfiles`` row to a FileStatusRecord."""
    status_code = _parse_status_code(_column(row, 4))
    return FileStatusRecord(
        file_id=_column(row, 0),
        file_name=_column(row, 1),
        file_size=_column(row, 2),
        server_id=_column(row, 3),
        status=decode_file_status(status_code),
        short_host=_column(row, 5),
        md5=_column(row, 6),
        status_code=status_code
    )


class FileStatusResolver:
    """Checks the status of several files with one ``checkfiles`` call."""

    def __init__(self, api: ServiceCaller):
        self.api = api
        self.logger = get_logger('rapidshare.files')

    def check(self, refs: Union[str, FileReference, Iterable[Union[str, FileReference]]]) -> List[FileStatusRecord]:
        """
        Retrieves information about RapidShare files.

        Args:
            refs: A file link, a FileReference, or an iterable of them

        Returns:
            One record per response row, in response order

        Raises:
            CallerError: If no file was given
        """
        if isinstance(refs, (str, FileReference)):
            refs = [refs]
        references = [parse_file_reference(ref) for ref in refs]
        if not references:
            raise CallerError("checkfiles requires at least one file")

        skipped = sum(1 for ref in references if ref.is_empty)
        if skipped:
            self.logger.debug("%d of %d file links could not be parsed", skipped, len(references))

        rows = self.api.call(
            CHECK_FILES_SERVICE,
            {
                'files': ','.join(ref.file_id for ref in references),
                'filenames': ','.join(ref.file_name for ref in references),
            },
            ResponseShape.DELIMITED_ROWS
        )
        return [row_to_record(row) for row in rows]
