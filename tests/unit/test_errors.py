"""Tests for the exception hierarchy."""

from ncbi_toolkit.errors import (
    EntrezError,
    EntrezParseError,
    EntrezTimeoutError,
    NetworkError,
    NoAbstractError,
    NotFoundError,
    UpstreamError,
)


class TestErrors:
    def test_error_message_format(self):
        """Test error message includes source."""
        error = EntrezError("Connection failed")
        assert "[entrez]" in str(error)
        assert "Connection failed" in str(error)
        assert error.status_code is None

    def test_upstream_error_carries_status_and_body(self):
        error = UpstreamError(500, body="<html>boom</html>", reason="Internal Server Error")
        assert error.status_code == 500
        assert error.body == "<html>boom</html>"
        assert str(error) == "[entrez] HTTP 500: Internal Server Error"

    def test_not_found_is_404(self):
        assert NotFoundError("nothing").status_code == 404
        assert NoAbstractError("nothing").status_code == 404

    def test_hierarchy(self):
        assert issubclass(NoAbstractError, NotFoundError)
        assert issubclass(EntrezTimeoutError, NetworkError)
        for cls in (UpstreamError, NotFoundError, EntrezParseError, NetworkError):
            assert issubclass(cls, EntrezError)
        assert not issubclass(NetworkError, UpstreamError)
