#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
import logging
from collections.abc import Callable
from typing import Final

from .codec import parse_body
from .config import (
    DEFAULT_ERROR_CODE_FIELD_NAME,
    RECOGNIZED_HEADER_KEYS,
    X_AMZN_ERROR_TYPE,
    ResolverConfig,
)
from .exceptions import AmbiguousErrorHeader
from .interfaces import Field, Fields, HTTPResponse, StructuredBody

_LOGGER = logging.getLogger(__name__)


class ErrorCodeResolver:
    """Determines the error code of an error response.

    Error codes may be sent in one of several headers or in a field of the JSON body.
    Headers take precedence over the body. The resolved code is the bare error name,
    with any legacy header suffix or body namespace prefix removed, for example
    ``AccessDeniedException`` for ``AccessDeniedException:http://internal/`` or
    ``com.amazon.coral#AccessDeniedException``.

    Resolvers hold no mutable state and may be shared between threads.
    """

    def __init__(self, error_code_field_name: str | None = None) -> None:
        """Initialize an ErrorCodeResolver.

        :param error_code_field_name: The name of the body field that carries the
            error code. Defaults to ``__type``.
        """
        if error_code_field_name is None:
            error_code_field_name = DEFAULT_ERROR_CODE_FIELD_NAME
        self._config: Final = ResolverConfig(
            error_code_field_name=error_code_field_name
        )

    @classmethod
    def from_config(cls, config: ResolverConfig) -> "ErrorCodeResolver":
        return cls(config.error_code_field_name)

    @property
    def config(self) -> ResolverConfig:
        return self._config

    def resolve(
        self, headers: Fields, body: StructuredBody | None = None
    ) -> str | None:
        """Resolve the error code from response headers and an optional body.

        If one of the recognized headers is present its value is used, even if it is
        empty, and the body is not consulted.

        :param headers: The response headers.
        :param body: The parsed response body, if there is one.
        :returns: The error code, or None if neither the headers nor the body carry
            one.
        :raises AmbiguousErrorHeader: If more than one recognized error code header is
            present.
        """
        return self._resolve(headers, lambda: body)

    def resolve_response(self, response: HTTPResponse) -> str | None:
        """Resolve the error code of an HTTP response.

        The body is only parsed if the headers carry no error code. An empty body is
        treated as absent. The status code is not used.

        :raises AmbiguousErrorHeader: If more than one recognized error code header is
            present.
        :raises BodyParseError: If the headers carry no error code and the body is not
            valid JSON.
        """
        return self._resolve(response.fields, lambda: parse_body(response.body))

    def _resolve(
        self, headers: Fields, load_body: Callable[[], StructuredBody | None]
    ) -> str | None:
        if (code := self._resolve_from_headers(headers)) is not None:
            _LOGGER.debug("Resolved error code %r from response headers.", code)
            return code

        if (body := load_body()) is None:
            _LOGGER.debug("No error code found in headers and no body to inspect.")
            return None

        code = self._resolve_from_body(body)
        _LOGGER.debug("Resolved error code %r from response body.", code)
        return code

    def _resolve_from_headers(self, headers: Fields) -> str | None:
        # Recognized names are matched exactly, using the name as it was received.
        matches: dict[str, Field] = {
            field.name: field
            for field in headers
            if field.name in RECOGNIZED_HEADER_KEYS
        }

        if not matches:
            return None

        if len(matches) > 1:
            _LOGGER.debug("Conflicting error code headers: %s", sorted(matches))
            raise AmbiguousErrorHeader(header_names=frozenset(matches))

        key, field = next(iter(matches.items()))
        # Only the first value is considered when the header is repeated.
        code = field.values[0] if field.values else ""
        if key == X_AMZN_ERROR_TYPE:
            code = code.split(":", 1)[0]
        return code

    def _resolve_from_body(self, body: StructuredBody) -> str | None:
        code = body.find_field(self._config.error_code_field_name)
        if code is None:
            return None
        # Codes may be namespaced, e.g. "com.amazon.coral#AccessDeniedException".
        return code.rsplit("#", 1)[-1]
