"""File reference and file status models."""
from dataclasses import dataclass
from enum import Enum
from typing import Optional

DOWNLOAD_URL = 'https://rs{server_id}{short_host}.rapidshare.com/files/{file_id}/{file_name}'


def build_file_url(server_id: str, short_host: str, file_id: str, file_name: str) -> str:
    """
    Builds the direct download URL of a file.

    Example:
        >>> build_file_url('370', 'l33', '829628035', 'HornyRhinos.jpg')
        'https://rs370l33.rapidshare.com/files/829628035/HornyRhinos.jpg'
    """
    return DOWNLOAD_URL.format(
        server_id=server_id,
        short_host=short_host,
        file_id=file_id,
        file_name=file_name
    )


class FileStatus(Enum):
    """Decoded ``checkfiles`` status."""
    OK = 'ok'
    ERROR = 'error'
    UNKNOWN = 'unknown'


@dataclass(frozen=True)
class FileReference:
    """A remote file identified by id and name."""
    file_id: str = ''
    file_name: str = ''

    @property
    def is_empty(self) -> bool:
        return not self.file_id and not self.file_name

    @property
    def url(self) -> str:
        return f"https://rapidshare.com/files/{self.file_id}/{self.file_name}"


@dataclass
class FileStatusRecord:
    """
    Status of one file as returned by ``checkfiles``.

    Attributes:
        file_id: File id (part of the url)
        file_name: File name (part of the url)
        file_size: Size in bytes, as returned (``"0"`` if the file is missing)
        server_id: Server id, used to build the download url
        status: Decoded status
        short_host: Short host, used to build the download url
        md5: MD5 checksum reported by the server
        status_code: Undecoded status code, None if not numeric
    """
    file_id: Optional[str]
    file_name: Optional[str]
    file_size: Optional[str]
    server_id: Optional[str]
    status: FileStatus
    short_host: Optional[str]
    md5: Optional[str]
    status_code: Optional[int] = None

    @property
    def is_ok(self) -> bool:
        return self.status is FileStatus.OK

    @property
    def download_url(self) -> str:
        """Direct download URL of the file."""
        return build_file_url(
            self.server_id or '',
            self.short_host or '',
            self.file_id or '',
            self.file_name or ''
        )
