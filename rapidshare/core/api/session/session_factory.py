"""Session factory using Factory Pattern."""
from typing import Dict, Optional

import requests
from requests.adapters import HTTPAdapter


class SessionFactory:
    """Factory for creating HTTP sessions."""

    @staticmethod
    def create_sync_session(headers: Optional[Dict[str, str]] = None) -> requests.Session:
        """Creates a synchronous HTTP session without automatic retries."""
        session = requests.Session()
        if headers:
            session.headers.update(headers)
        adapter = HTTPAdapter(max_retries=0)
        session.mount('http://', adapter)
        session.mount('https://', adapter)
        return session
