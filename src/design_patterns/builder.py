"""
HTTP request builder (Builder pattern).

The **Builder pattern** assembles a value object step by step through chained
calls and hands out the finished, immutable object only from a terminal
`build()` call that checks required fields:

    request = (
        HttpRequestBuilder()
        .url("https://api.example.com")
        .method("POST")
        .header("Content-Type", "application/json")
        .body('{"key": "value"}')
        .build()
    )

The builder keeps its own mutable state; `build()` snapshots it into a frozen
`HttpRequest`, so the same builder can keep going and build again without
touching requests already handed out.

Run with:
    python -m design_patterns.builder
"""

import logging

from pydantic import ValidationError

from design_patterns.config import configure_logging
from design_patterns.domain.errors import RequestValidationError
from design_patterns.domain.models import HttpMethod, HttpRequest

logger = logging.getLogger(__name__)


class HttpRequestBuilder:
    """Accumulates request fields and validates them in `build()`."""

    def __init__(self) -> None:
        self._url: str | None = None
        self._method: str | None = None
        self._headers: dict[str, str] = {}
        self._body: str | None = None

    def url(self, url: str) -> "HttpRequestBuilder":
        self._url = url
        return self

    def method(self, method: str | HttpMethod) -> "HttpRequestBuilder":
        # Verbs are case-insensitive on input; validity is checked in build().
        self._method = method.value if isinstance(method, HttpMethod) else method.upper()
        return self

    def header(self, key: str, value: str) -> "HttpRequestBuilder":
        """Set a header. Setting the same key again replaces the old value."""
        self._headers[key] = value
        return self

    def body(self, body: str) -> "HttpRequestBuilder":
        self._body = body
        return self

    def build(self) -> HttpRequest:
        """Validate the accumulated fields and return an immutable request.

        Raises:
            RequestValidationError: the URL was never set (or is empty), or a
                field failed model validation, e.g. an unknown HTTP verb.
        """
        if not self._url:
            raise RequestValidationError("URL is required")
        try:
            request = HttpRequest(
                url=self._url,
                method=self._method,
                headers=dict(self._headers),
                body=self._body,
            )
        except ValidationError as exc:
            raise RequestValidationError(f"Invalid request: {exc}") from exc
        logger.debug("Built %s request for %s", request.method, request.url)
        return request


def run_demo() -> None:
    request = (
        HttpRequestBuilder()
        .url("https://api.example.com")
        .method("POST")
        .header("Content-Type", "application/json")
        .body('{"key": "value"}')
        .build()
    )
    print(request.model_dump_json(indent=2))


def main() -> None:
    configure_logging()
    run_demo()


if __name__ == "__main__":
    main()
