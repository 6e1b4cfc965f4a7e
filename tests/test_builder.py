"""Tests for HttpRequestBuilder."""

import json

import pytest
from pydantic import ValidationError

from design_patterns.builder import HttpRequestBuilder, run_demo
from design_patterns.domain.errors import DesignPatternError, RequestValidationError
from design_patterns.domain.models import HttpMethod


def test_url_only_uses_defaults() -> None:
    request = HttpRequestBuilder().url("https://x").build()
    assert request.url == "https://x"
    assert request.method is None
    assert request.body is None
    assert request.headers == {}


def test_missing_url_fails() -> None:
    builder = HttpRequestBuilder().method("GET").header("Accept", "*/*").body("{}")
    with pytest.raises(RequestValidationError, match="URL is required"):
        builder.build()


def test_empty_url_fails() -> None:
    with pytest.raises(RequestValidationError):
        HttpRequestBuilder().url("").build()


def test_validation_error_is_value_error() -> None:
    with pytest.raises(ValueError):
        HttpRequestBuilder().build()
    assert issubclass(RequestValidationError, DesignPatternError)


def test_duplicate_headers_last_write_wins() -> None:
    request = (
        HttpRequestBuilder()
        .url("https://x")
        .header("Accept", "text/plain")
        .header("X-Trace", "1")
        .header("Accept", "application/json")
        .build()
    )
    assert request.headers == {"Accept": "application/json", "X-Trace": "1"}
    assert len(request.headers) == 2


def test_method_is_case_insensitive() -> None:
    assert HttpRequestBuilder().url("https://x").method("post").build().method is HttpMethod.POST
    assert HttpRequestBuilder().url("https://x").method(HttpMethod.DELETE).build().method is HttpMethod.DELETE


def test_unknown_method_fails_at_build() -> None:
    builder = HttpRequestBuilder().url("https://x").method("FETCH")
    with pytest.raises(RequestValidationError) as excinfo:
        builder.build()
    assert isinstance(excinfo.value.__cause__, ValidationError)


def test_built_request_is_immutable() -> None:
    request = HttpRequestBuilder().url("https://x").build()
    with pytest.raises(ValidationError):
        request.url = "https://y"


def test_builder_reuse_does_not_leak_into_built_request() -> None:
    builder = HttpRequestBuilder().url("https://x").header("A", "1")
    first = builder.build()
    second = builder.header("B", "2").url("https://y").build()
    assert first.headers == {"A": "1"}
    assert first.url == "https://x"
    assert second.headers == {"A": "1", "B": "2"}
    assert second.url == "https://y"


def test_demo_prints_request_json(capsys: pytest.CaptureFixture[str]) -> None:
    run_demo()
    payload = json.loads(capsys.readouterr().out)
    assert payload == {
        "url": "https://api.example.com",
        "method": "POST",
        "headers": {"Content-Type": "application/json"},
        "body": '{"key": "value"}',
    }
