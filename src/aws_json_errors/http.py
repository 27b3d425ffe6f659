#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
from dataclasses import dataclass, field

from . import interfaces
from .fields import Fields


@dataclass(kw_only=True)
class HTTPResponse:
    """Basic implementation of :py:class:`.interfaces.HTTPResponse`."""

    status: int
    """The 3 digit response status code (1xx, 2xx, 3xx, 4xx, 5xx)."""

    fields: interfaces.Fields = field(default_factory=Fields)
    """HTTP header fields."""

    body: bytes = b""
    """The raw response payload."""

    reason: str | None = None
    """Optional string provided by the server explaining the status."""
