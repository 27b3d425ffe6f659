#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
from dataclasses import dataclass, field


class JSONErrorsError(Exception):
    """Base exception type for all exceptions raised by aws-json-errors."""


@dataclass(kw_only=True)
class AmbiguousErrorHeader(JSONErrorsError):
    """Raised when a response carries more than one recognized error code header.

    A well-formed response presents at most one of the recognized header keys, so
    this indicates a malformed response rather than a condition worth retrying.
    """

    header_names: frozenset[str] = field(default_factory=frozenset)
    """The recognized header names that were present at the same time."""

    def __post_init__(self):
        super().__init__(
            "Response contains multiple headers representing the error code: "
            f"{', '.join(sorted(self.header_names))}"
        )


class BodyParseError(JSONErrorsError):
    """Exception indicating a response body could not be parsed as JSON."""
