#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
from collections.abc import Mapping, Sequence
from decimal import Decimal

from .interfaces import StructuredBody

JSONValue = (
    Mapping[str, "JSONValue"]
    | Sequence["JSONValue"]
    | str
    | int
    | float
    | Decimal
    | bool
    | None
)
"""A parsed JSON value."""


class _Missing:
    def __repr__(self) -> str:
        return "MISSING"


_MISSING = _Missing()


class JSONDocument(StructuredBody):
    """A parsed JSON payload that can be queried by field name.

    The document never modifies the value it wraps.
    """

    def __init__(self, value: JSONValue) -> None:
        """Initializes a JSON document.

        :param value: The parsed JSON value. This is typically a mapping, but any JSON
            value is accepted.
        """
        self._value = value

    @property
    def value(self) -> JSONValue:
        """The underlying parsed value."""
        return self._value

    def has_field(self, name: str) -> bool:
        """Whether the top level of the document is an object with the given key."""
        return isinstance(self._value, Mapping) and name in self._value

    def find_field(self, name: str) -> str | None:
        """Find the text value of the first field with the given name.

        The search is a depth-first, pre-order walk of the whole tree. Each object's
        entries are visited in order: an entry's key is compared first, and if it
        doesn't match the entry's value is searched completely before moving on to the
        next entry. Array elements are searched in index order. This means a match
        nested under an earlier entry wins over a match on a later key of the same
        object.

        Strings are returned as-is. Booleans and numbers are rendered as their JSON
        text. Nulls, objects, and arrays have no text value, so ``None`` is returned
        for them, as it is when no field matches.

        :param name: The field name to search for.
        """
        found = self._find(name)
        if found is _MISSING:
            return None
        return _as_text(found)  # type: ignore

    def _find(self, name: str) -> JSONValue | _Missing:
        # Entries are pushed in reverse so that popping yields document order.
        stack: list[tuple[str | None, JSONValue]] = [(None, self._value)]
        while stack:
            key, node = stack.pop()
            if key == name:
                return node
            if isinstance(node, Mapping):
                stack.extend(reversed(list(node.items())))  # type: ignore
            elif isinstance(node, Sequence) and not isinstance(node, str | bytes):
                stack.extend((None, element) for element in reversed(node))
        return _MISSING

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JSONDocument):
            return False
        return self._value == other._value

    def __repr__(self) -> str:
        return f"JSONDocument({self._value!r})"


def _as_text(value: JSONValue) -> str | None:
    match value:
        case str():
            return value
        case bool():
            return "true" if value else "false"
        case int() | float() | Decimal():
            return str(value)
        case _:
            return None
