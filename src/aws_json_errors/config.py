#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
from dataclasses import dataclass
from typing import Final

X_AMZN_ERROR_TYPE: Final = "x-amzn-ErrorType"
"""Header used by services with HTTP bindings to send the error code.

The value may carry a legacy ``<Code>:<suffix>`` form.
"""

ERROR_CODE_HEADER: Final = ":error-code"
EXCEPTION_TYPE_HEADER: Final = ":exception-type"

RECOGNIZED_HEADER_KEYS: Final = (
    X_AMZN_ERROR_TYPE,
    ERROR_CODE_HEADER,
    EXCEPTION_TYPE_HEADER,
)
"""Header keys that carry the error code. A response should only contain one."""

DEFAULT_ERROR_CODE_FIELD_NAME: Final = "__type"


@dataclass(frozen=True, slots=True)
class ResolverConfig:
    """Settings for resolving error codes."""

    error_code_field_name: str = DEFAULT_ERROR_CODE_FIELD_NAME
    """The name of the body field that carries the error code."""

    def __post_init__(self) -> None:
        if not self.error_code_field_name:
            raise ValueError("error_code_field_name must be a non-empty string.")

    @property
    def recognized_header_keys(self) -> tuple[str, ...]:
        """The header keys that carry the error code."""
        return RECOGNIZED_HEADER_KEYS
