"""
Domain models shared by the pattern demos.

Value objects use Pydantic v2 BaseModel for validation and JSON output.
`HttpRequest` is frozen: once the builder hands it out, assigning to any of
its fields raises a ValidationError.

Enums inherit from (str, Enum) so they serialize as plain strings in JSON
(e.g. "POST" instead of {"value": "POST"}) and compare equal to their value.
"""

from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class HttpMethod(str, Enum):
    """HTTP verbs accepted by the request builder."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"


class NotificationType(str, Enum):
    """Discriminant keys understood by NotificationFactory."""

    EMAIL = "email"
    SMS = "sms"


# ── Builder output ───────────────────────────────────────────────────


class HttpRequest(BaseModel):
    """Immutable request produced by `HttpRequestBuilder.build()`.

    Only `url` is required. An unset verb or body stays ``None`` and the
    headers mapping defaults to empty.
    """

    model_config = ConfigDict(frozen=True)

    url: str = Field(..., min_length=1)
    method: HttpMethod | None = None
    headers: dict[str, str] = Field(default_factory=dict)
    body: str | None = None


# ── Strategy output ──────────────────────────────────────────────────


class PaymentReceipt(BaseModel):
    """What a payment strategy reports back to the shopping cart."""

    model_config = ConfigDict(frozen=True)

    method: str = Field(..., min_length=1)  # e.g. "cash", "UPI"
    amount: Decimal = Field(..., ge=0)
