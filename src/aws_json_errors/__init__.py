#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
from .codec import parse_body
from .config import ResolverConfig
from .documents import JSONDocument
from .exceptions import AmbiguousErrorHeader, BodyParseError, JSONErrorsError
from .fields import Field, Fields, tuples_to_fields
from .http import HTTPResponse
from .resolver import ErrorCodeResolver

__version__ = "0.1.0"
__all__ = (
    "AmbiguousErrorHeader",
    "BodyParseError",
    "ErrorCodeResolver",
    "Field",
    "Fields",
    "HTTPResponse",
    "JSONDocument",
    "JSONErrorsError",
    "ResolverConfig",
    "parse_body",
    "tuples_to_fields",
)
