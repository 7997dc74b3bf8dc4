"""Tests for the remote code formatter."""

from unittest.mock import MagicMock

import pytest
import requests

from gotour.services import CodeFormatter


def make_session(payload=None, error=None):
    session = MagicMock()
    response = MagicMock()
    response.json.return_value = payload or {}
    if error is not None:
        response.raise_for_status.side_effect = error
    session.post.return_value = response
    return session


class TestCodeFormatter:
    """Test the /_/fmt client."""

    def test_posts_form_encoded_body(self):
        session = make_session({"Body": "package main\n", "Error": ""})
        formatter = CodeFormatter("http://tour.test/", session=session, timeout=3)

        formatter.format("package  main", True)

        args, kwargs = session.post.call_args
        assert args[0] == "http://tour.test/_/fmt"
        assert kwargs["data"] == {"body": "package  main", "imports": "true"}
        assert kwargs["headers"]["Content-Type"] == "application/x-www-form-urlencoded"
        assert kwargs["timeout"] == 3

    def test_imports_false(self):
        session = make_session({"Body": "", "Error": ""})
        CodeFormatter(session=session).format("x", False)
        assert session.post.call_args.kwargs["data"]["imports"] == "false"

    def test_returns_formatted_body(self):
        session = make_session({"Body": "package main\n", "Error": ""})
        result = CodeFormatter(session=session).format("package  main")
        assert result.ok
        assert result.body == "package main\n"

    def test_returns_formatting_error(self):
        session = make_session({"Body": "", "Error": "prog.go:1:1: expected 'package', found x"})
        result = CodeFormatter(session=session).format("x")
        assert not result.ok
        assert "expected 'package'" in result.error

    def test_http_error_propagates(self):
        session = make_session(error=requests.HTTPError("500 Server Error"))
        with pytest.raises(requests.HTTPError):
            CodeFormatter(session=session).format("x")

    def test_connection_error_propagates(self):
        session = MagicMock()
        session.post.side_effect = requests.ConnectionError("refused")
        with pytest.raises(requests.RequestException):
            CodeFormatter(session=session).format("x")
