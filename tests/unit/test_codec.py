#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
from decimal import Decimal
from io import BytesIO

import pytest
from aws_json_errors.codec import parse_body
from aws_json_errors.documents import JSONDocument, JSONValue
from aws_json_errors.exceptions import BodyParseError


@pytest.mark.parametrize(
    "body, expected",
    [
        (b'{"__type": "FooError"}', {"__type": "FooError"}),
        (
            b'{"error": {"code": "FooError", "retryable": false}}',
            {"error": {"code": "FooError", "retryable": False}},
        ),
        (b'[1, 2.5, null]', [1, Decimal("2.5"), None]),
        (b'"FooError"', "FooError"),
        (b"{}", {}),
    ],
)
def test_parse_body(body: bytes, expected: JSONValue) -> None:
    assert parse_body(body) == JSONDocument(expected)


@pytest.mark.parametrize("body", [b"", b"   ", b"\n\t"])
def test_parse_empty_body(body: bytes) -> None:
    assert parse_body(body) is None


def test_parse_body_from_reader() -> None:
    document = parse_body(BytesIO(b'{"message": "Bad", "__type": "FooError"}'))
    assert document is not None
    assert document.find_field("__type") == "FooError"


@pytest.mark.parametrize("body", [b"{", b'{"__type": }', b"not json"])
def test_parse_invalid_body(body: bytes) -> None:
    with pytest.raises(BodyParseError):
        parse_body(body)
