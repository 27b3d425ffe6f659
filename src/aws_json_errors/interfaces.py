#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
from collections.abc import Iterator
from typing import Protocol


class BytesReader(Protocol):
    """A protocol for objects that support reading bytes from them."""

    def read(self, size: int = -1, /) -> bytes: ...


class Field(Protocol):
    """A name-value pair representing a single header in a response.

    Collections may look fields up case insensitively, but ``name`` must preserve
    the case the field was received with.
    """

    name: str
    values: list[str]

    def add(self, value: str) -> None:
        """Append a value to a field."""
        ...


class Fields(Protocol):
    """Mapping of header names to their ordered values."""

    # Entries are keyed off the normalized name of a provided Field
    entries: dict[str, Field]

    def set_field(self, field: Field) -> None:
        """Alias for __setitem__ to utilize the field.name for the entry key."""
        ...

    def get(self, key: str, default: Field | None = None) -> Field | None:
        """Retrieve a Field entry, or ``default`` if it is not present."""
        ...

    def __setitem__(self, name: str, field: Field) -> None:
        """Set entry for a Field name."""
        ...

    def __getitem__(self, name: str) -> Field:
        """Retrieve Field entry."""
        ...

    def __contains__(self, key: str) -> bool:
        """Whether an entry exists for the given name."""
        ...

    def __iter__(self) -> Iterator[Field]:
        """Allow iteration over entries."""
        ...

    def __len__(self) -> int:
        """Get total number of Field entries."""
        ...


class StructuredBody(Protocol):
    """A parsed response payload that can be queried by field name."""

    def has_field(self, name: str) -> bool:
        """Whether the top level of the body has a field with the given name."""
        ...

    def find_field(self, name: str) -> str | None:
        """Find the text value of the first field with the given name.

        The whole tree is searched, not just the top level.
        """
        ...


class HTTPResponse(Protocol):
    """The parts of an HTTP response that carry error information."""

    @property
    def status(self) -> int:
        """The 3 digit response status code (1xx, 2xx, 3xx, 4xx, 5xx)."""
        ...

    @property
    def fields(self) -> Fields:
        """``Fields`` object containing the HTTP headers."""
        ...

    @property
    def body(self) -> bytes:
        """The raw response payload."""
        ...
