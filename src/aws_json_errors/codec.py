#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
import logging
from decimal import Decimal
from io import BytesIO
from typing import Literal, Protocol, cast

import ijson  # type: ignore
from ijson.common import ObjectBuilder  # type: ignore

from .documents import JSONDocument, JSONValue
from .exceptions import BodyParseError
from .interfaces import BytesReader

_LOGGER = logging.getLogger(__name__)

# ijson isn't typed, so these describe the events it produces.
JSONParseEventType = Literal[
    "null",
    "string",
    "number",
    "boolean",
    "start_array",
    "end_array",
    "start_map",
    "map_key",
    "end_map",
]

JSONParseEventValue = str | int | float | Decimal | bool | None


class TypedObjectBuilder(Protocol):
    value: JSONValue

    def event(self, event: JSONParseEventType, value: JSONParseEventValue): ...


def parse_body(source: bytes | BytesReader) -> JSONDocument | None:
    """Parse a response payload into a :class:`JSONDocument`.

    :param source: The raw payload, or a reader to pull it from.
    :returns: The parsed document, or None if the payload is empty or only contains
        whitespace.
    :raises BodyParseError: If the payload is not valid JSON.
    """
    data = source if isinstance(source, bytes) else source.read()
    if not data.strip():
        _LOGGER.debug("Response body is empty, no document to parse.")
        return None

    builder = cast(TypedObjectBuilder, ObjectBuilder())
    try:
        for _, event, value in ijson.parse(BytesIO(data)):
            builder.event(event, value)
    except ijson.JSONError as e:
        raise BodyParseError(f"Unable to parse response body as JSON: {e}") from e

    return JSONDocument(builder.value)
