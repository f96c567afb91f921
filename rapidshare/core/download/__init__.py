"""File downloads."""
from .downloader import Downloader, ProgressCallback, filename_from_url, safe_filename

__all__ = ['Downloader', 'ProgressCallback', 'filename_from_url', 'safe_filename']
