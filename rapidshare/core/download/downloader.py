"""Streaming download of direct file URLs."""
from pathlib import Path
from typing import Callable, Optional, Union
from urllib.parse import unquote, urlparse

import requests

from ..api.config import APIConfig
from ..api.errors import CallerError, TransportError
from ..logging import get_logger

ProgressCallback = Callable[[int, int], None]


def filename_from_url(url: str) -> str:
    """Last path segment of a URL, unquoted."""
    return unquote(urlparse(url).path.rstrip('/').rsplit('/', 1)[-1])


def safe_filename(name: Optional[str]) -> str:
    """
    Reduces a file name to its last path component.

    Raises:
        CallerError: If nothing usable is left
    """
    base = Path((name or '').replace('\\', '/')).name
    if base in ('', '.', '..'):
        raise CallerError(f"Unsafe or empty file name: {name!r}")
    return base


class Downloader:
    """Downloads a file with one streaming GET. No resume, no retry."""

    def __init__(self, http_session: requests.Session, config: Optional[APIConfig] = None):
        self.http_session = http_session
        self.config = config or APIConfig.default()
        self.logger = get_logger('rapidshare.download')

    def download(
        self,
        url: str,
        dest: Union[str, Path] = ".",
        filename: Optional[str] = None,
        progress_callback: Optional[ProgressCallback] = None
    ) -> Path:
        """
        Download a file.

        A partially written file is removed if the transfer fails.

        Args:
            url: Direct download URL
            dest: Destination directory
            filename: Name to save under (default: name from the URL);
                only its last path component is used
            progress_callback: Optional callback(downloaded_bytes, total_bytes)

        Returns:
            Path to downloaded file
        """
        filename = safe_filename(filename or filename_from_url(url))

        path = Path(dest) / filename
        path.parent.mkdir(parents=True, exist_ok=True)

        kwargs = self.config.get_request_kwargs()
        created = False
        try:
            with self.http_session.get(url, stream=True, **kwargs) as response:
                response.raise_for_status()
                total = int(response.headers.get('Content-Length') or 0)
                downloaded = 0

                with path.open('wb') as f:
                    created = True
                    for chunk in response.iter_content(chunk_size=self.config.chunk_size):
                        if not chunk:
                            continue
                        f.write(chunk)
                        downloaded += len(chunk)

                        if progress_callback:
                            progress_callback(downloaded, total)
        except requests.HTTPError as e:
            self._discard(path, created)
            status = e.response.status_code if e.response is not None else None
            raise TransportError(f"HTTP {status} while downloading", url, status) from e
        except requests.RequestException as e:
            self._discard(path, created)
            raise TransportError(f"Download failed: {e}", url) from e
        except BaseException:
            self._discard(path, created)
            raise

        self.logger.info("Downloaded %s (%d bytes)", path, downloaded)
        return path

    def _discard(self, path: Path, created: bool) -> None:
        if created:
            self.logger.debug("Removing incomplete download %s", path)
            path.unlink(missing_ok=True)
