"""Embed field builder."""

from __future__ import annotations

from embedcraft.errors import ErrorKind
from embedcraft.limits import FIELD_NAME_LENGTH_LIMIT, FIELD_VALUE_LENGTH_LIMIT
from embedcraft.models import FieldData
from embedcraft.validation import check_text


class FieldBuilder:
    """Build a single embed field.

    The name and value are checked as soon as the builder is created, so a
    ``FieldBuilder`` that exists always builds.

    Raises:
        EmbedValidationError: ``NAME_EMPTY``, ``NAME_TOO_LONG``,
            ``VALUE_EMPTY`` or ``VALUE_TOO_LONG``.
    """

    def __init__(self, name: str, value: str) -> None:
        check_text(
            name,
            field="name",
            limit=FIELD_NAME_LENGTH_LIMIT,
            empty=ErrorKind.NAME_EMPTY,
            too_long=ErrorKind.NAME_TOO_LONG,
        )
        check_text(
            value,
            field="value",
            limit=FIELD_VALUE_LENGTH_LIMIT,
            empty=ErrorKind.VALUE_EMPTY,
            too_long=ErrorKind.VALUE_TOO_LONG,
        )
        self._name = name
        self._value = value
        self._inline = False

    def inline(self, inline: bool = True) -> FieldBuilder:
        """Render the field next to its neighbours instead of on its own line."""
        self._inline = inline
        return self

    def build(self) -> FieldData:
        return FieldData(name=self._name, value=self._value, inline=self._inline)
