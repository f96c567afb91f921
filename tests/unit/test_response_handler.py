"""Tests for response parsing and error classification."""
import pytest

from rapidshare.core.api.errors import (
    APIErrorKind,
    AuthenticationError,
    CallerError,
    GenericApiError,
    UnknownServiceError,
)
from rapidshare.core.api.request import ResponseHandler, ResponseShape


class TestParseRaw:
    """Test suite for the raw shape."""

    def test_returns_body_unchanged(self):
        """Test raw body is returned as is."""
        body = "  some text\nwith lines  "
        assert ResponseHandler.parse_response(body, ResponseShape.RAW) == body

    def test_default_shape_is_raw(self):
        """Test default shape."""
        assert ResponseHandler.parse_response("abc") == "abc"

    def test_empty_body(self):
        """Test empty body yields empty string."""
        assert ResponseHandler.parse_response("", ResponseShape.RAW) == ""


class TestParseRows:
    """Test suite for the delimited rows shape."""

    def test_rows(self):
        """Test lines split into fields."""
        body = "1,2,3\n4,5,6\n"
        assert ResponseHandler.parse_response(body, ResponseShape.DELIMITED_ROWS) == [
            ['1', '2', '3'],
            ['4', '5', '6'],
        ]

    def test_whitespace_around_lines(self):
        """Test surrounding whitespace is ignored."""
        body = "  a,b \n\t c,d\n\n"
        assert ResponseHandler.parse_rows(body) == [['a', 'b'], ['c', 'd']]

    def test_no_type_coercion(self):
        """Test fields stay strings."""
        rows = ResponseHandler.parse_rows("1217244932,100")
        assert rows == [['1217244932', '100']]

    def test_empty_body(self):
        """Test empty body yields no rows."""
        assert ResponseHandler.parse_response("", ResponseShape.DELIMITED_ROWS) == []
        assert ResponseHandler.parse_rows("  \n ") == []


class TestParseKeyValues:
    """Test suite for the key-value shape."""

    def test_text_to_dict(self):
        """Test conversion of key=value lines."""
        assert ResponseHandler.parse_key_values(" key1=value1 \n\tkey2=value2") == {
            'key1': 'value1',
            'key2': 'value2',
        }

    def test_account_details(self, account_details_body, cookie):
        """Test getaccountdetails body."""
        details = ResponseHandler.parse_response(account_details_body, 'hash')

        assert details == {
            'accountid': '12345', 'servertime': '1217244932', 'addtime': '127273393',
            'username': 'valid_account', 'directstart': '1', 'country': 'CZ',
            'mailflags': None, 'language': None, 'jsconfig': '1000',
            'email': 'valid_account@email.com', 'curfiles': '100',
            'curspace': '103994340', 'rapids': '100', 'billeduntil': '1320093121',
            'nortuntil': '1307123910', 'cookie': cookie,
        }

    def test_splits_on_first_equals(self):
        """Test values may contain '='."""
        assert ResponseHandler.parse_key_values("url=a=b") == {'url': 'a=b'}

    def test_duplicate_key_last_wins(self):
        """Test later duplicate keys overwrite earlier ones."""
        assert ResponseHandler.parse_key_values("k=1\nk=2") == {'k': '2'}

    def test_missing_value(self):
        """Test keys without value map to None."""
        assert ResponseHandler.parse_key_values("a=\nb") == {'a': None, 'b': None}

    def test_round_trip(self):
        """Test parsed pairs serialize back to the same lines."""
        body = "accountid=12345\nusername=valid_account\nemail=x@example.com"
        parsed = ResponseHandler.parse_key_values(body)

        assert "\n".join(f"{k}={v}" for k, v in parsed.items()) == body

    def test_empty_body(self):
        """Test empty body yields empty dict."""
        assert ResponseHandler.parse_response("", ResponseShape.KEY_VALUE_MAP) == {}


class TestResponseShape:
    """Test suite for shape selection."""

    @pytest.mark.parametrize("value,expected", [
        ('raw', ResponseShape.RAW),
        ('csv', ResponseShape.DELIMITED_ROWS),
        ('HASH', ResponseShape.KEY_VALUE_MAP),
        (None, ResponseShape.RAW),
        (ResponseShape.DELIMITED_ROWS, ResponseShape.DELIMITED_ROWS),
    ])
    def test_coerce(self, value, expected):
        """Test accepted shape selectors."""
        assert ResponseShape.coerce(value) is expected

    def test_invalid_shape(self):
        """Test invalid selector raises CallerError."""
        with pytest.raises(CallerError, match="Invalid response shape"):
            ResponseHandler.parse_response("x", "xml")


class TestHandleError:
    """Test suite for error classification."""

    @pytest.mark.parametrize("body", [
        "",
        "accountid=12345",
        "829628035,HornyRhinos.jpg,272288,370,1,l33,abc",
        "error: lowercase is not an error",
        " ERROR: leading space",
    ])
    def test_non_error_passes(self, body):
        """Test bodies without the prefix are not errors."""
        assert ResponseHandler.handle_error(body, 'checkfiles') is None
        assert ResponseHandler.process_response(body, 'checkfiles') == body

    def test_login_failed(self):
        """Test login failure."""
        with pytest.raises(AuthenticationError) as exc_info:
            ResponseHandler.handle_error("ERROR: Login failed. (abc)", 'getaccountdetails')

        assert exc_info.value.kind is APIErrorKind.LOGIN_FAILED

    def test_invalid_routine(self):
        """Test unknown service carries the requested service name."""
        with pytest.raises(UnknownServiceError) as exc_info:
            ResponseHandler.handle_error(
                "ERROR: Invalid routine called. (5b97895d)", 'invalid_routine'
            )

        assert exc_info.value.service == 'invalid_routine'
        assert exc_info.value.kind is APIErrorKind.INVALID_ROUTINE

    def test_generic_error(self):
        """Test other errors carry the message."""
        with pytest.raises(GenericApiError) as exc_info:
            ResponseHandler.handle_error("ERROR: Files invalid. (1dd3841d)", 'checkfiles')

        assert exc_info.value.message == "Files invalid"
        assert str(exc_info.value) == "Files invalid"

    def test_error_without_period(self):
        """Test message without terminating period."""
        with pytest.raises(GenericApiError, match="Something broke"):
            ResponseHandler.handle_error("ERROR: Something broke", 'x')

    def test_errors_checked_before_parsing(self):
        """Test errors are raised whatever the shape."""
        with pytest.raises(AuthenticationError):
            ResponseHandler.process_response(
                "ERROR: Login failed. (abc)", 'getaccountdetails', ResponseShape.KEY_VALUE_MAP
            )
