"""Pytest fixtures for rapidshare tests."""
from unittest.mock import MagicMock, Mock

import pytest

from rapidshare.core.api import APIConfig

COOKIE = 'F0EEB41B38363A41F0D125102637DB7236468731F8DB760DC57934B4714C8D13'

ACCOUNT_DETAILS = (
    "accountid=12345\n"
    "servertime=1217244932\n"
    "addtime=127273393\n"
    "username=valid_account\n"
    "directstart=1\n"
    "country=CZ\n"
    "mailflags=\n"
    "language=\n"
    "jsconfig=1000\n"
    "email=valid_account@email.com\n"
    "curfiles=100\n"
    "curspace=103994340\n"
    "rapids=100\n"
    "billeduntil=1320093121\n"
    "nortuntil=1307123910\n"
    f"cookie={COOKIE}\n"
)

CHECKFILES_SINGLE = "829628035,HornyRhinos.jpg,272288,370,1,l33,8700146036606454677EFAFB4A2AC52E\n"

CHECKFILES_MULTI = (
    "829628035,HornyRhinos.jpg,272288,370,1,l33,8700146036606454677EFAFB4A2AC52E\n"
    "428232373,HappyHippos.jpg,137665,493,1,tl,AAA4A8D4A3F2A7D8E8C6D8B2E3A1F0C9\n"
    "766059293,ElegantElephants.jpg,0,0,0,NONE,NONE\n"
)

FILE_URLS = [
    'https://rapidshare.com/files/829628035/HornyRhinos.jpg',
    'https://rapidshare.com/files/428232373/HappyHippos.jpg',
    'https://rapidshare.com/files/766059293/ElegantElephants.jpg',
]


def _make_response(text: str = '', status_code: int = 200):
    response = Mock()
    response.text = text
    response.status_code = status_code
    response.raise_for_status = Mock()
    return response


def _make_stream_response(chunks, content_length=None):
    response = MagicMock()
    response.__enter__.return_value = response
    response.__exit__.return_value = False
    response.headers = {}
    if content_length is not None:
        response.headers['Content-Length'] = str(content_length)
    response.iter_content.return_value = list(chunks)
    return response


@pytest.fixture
def cookie():
    """Valid session cookie."""
    return COOKIE


@pytest.fixture
def account_details_body():
    """Body of a successful getaccountdetails call."""
    return ACCOUNT_DETAILS


@pytest.fixture
def checkfiles_single_body():
    """Body of checkfiles for one file."""
    return CHECKFILES_SINGLE


@pytest.fixture
def checkfiles_multi_body():
    """Body of checkfiles for three files."""
    return CHECKFILES_MULTI


@pytest.fixture
def file_urls():
    """Three RapidShare file links."""
    return list(FILE_URLS)


@pytest.fixture
def make_response():
    """Factory for fake requests responses with a text body."""
    return _make_response


@pytest.fixture
def make_stream_response():
    """Factory for fake streaming responses usable as context managers."""
    return _make_stream_response


@pytest.fixture
def config():
    """Default API configuration."""
    return APIConfig.default()


@pytest.fixture
def http_session():
    """Fake requests session."""
    session = Mock()
    session.get.return_value = _make_response('')
    return session


@pytest.fixture
def respond(http_session):
    """Scripts the bodies returned by consecutive GET requests."""
    def _respond(*bodies):
        http_session.get.side_effect = [
            _make_response(body) if isinstance(body, str) else body
            for body in bodies
        ]
        return http_session
    return _respond


@pytest.fixture
def requested_urls(http_session):
    """Returns the URLs passed to ``http_session.get`` so far."""
    def _urls():
        return [c.args[0] for c in http_session.get.call_args_list]
    return _urls
