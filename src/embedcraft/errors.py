"""Validation errors raised by the embed builders.

Every constraint the builders enforce maps to exactly one ``ErrorKind``.
Errors are raised to the caller of the offending operation and carry enough
detail (field, length, limit, value) to explain what went wrong.
"""

from __future__ import annotations

from enum import StrEnum


class ErrorKind(StrEnum):
    """The closed set of embed validation failures."""

    NAME_EMPTY = "name_empty"
    NAME_TOO_LONG = "name_too_long"
    VALUE_EMPTY = "value_empty"
    VALUE_TOO_LONG = "value_too_long"
    TITLE_EMPTY = "title_empty"
    TITLE_TOO_LONG = "title_too_long"
    DESCRIPTION_EMPTY = "description_empty"
    DESCRIPTION_TOO_LONG = "description_too_long"
    FOOTER_TEXT_EMPTY = "footer_text_empty"
    FOOTER_TEXT_TOO_LONG = "footer_text_too_long"
    AUTHOR_NAME_EMPTY = "author_name_empty"
    AUTHOR_NAME_TOO_LONG = "author_name_too_long"
    INVALID_TEXT = "invalid_text"
    INVALID_URL = "invalid_url"
    EMPTY_ATTACHMENT_NAME = "empty_attachment_name"
    ATTACHMENT_EXTENSION_MISSING = "attachment_extension_missing"
    INVALID_TIMESTAMP = "invalid_timestamp"
    COLOR_OUT_OF_RANGE = "color_out_of_range"
    TOO_MANY_FIELDS = "too_many_fields"
    EMBED_TOO_LARGE = "embed_too_large"


_MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.NAME_EMPTY: "field name must not be empty",
    ErrorKind.NAME_TOO_LONG: "field name is {length} characters, limit is {limit}",
    ErrorKind.VALUE_EMPTY: "field value must not be empty",
    ErrorKind.VALUE_TOO_LONG: "field value is {length} characters, limit is {limit}",
    ErrorKind.TITLE_EMPTY: "title must not be empty",
    ErrorKind.TITLE_TOO_LONG: "title is {length} characters, limit is {limit}",
    ErrorKind.DESCRIPTION_EMPTY: "description must not be empty",
    ErrorKind.DESCRIPTION_TOO_LONG: "description is {length} characters, limit is {limit}",
    ErrorKind.FOOTER_TEXT_EMPTY: "footer text must not be empty",
    ErrorKind.FOOTER_TEXT_TOO_LONG: "footer text is {length} characters, limit is {limit}",
    ErrorKind.AUTHOR_NAME_EMPTY: "author name must not be empty",
    ErrorKind.AUTHOR_NAME_TOO_LONG: "author name is {length} characters, limit is {limit}",
    ErrorKind.INVALID_TEXT: "{field} is not valid Unicode text",
    ErrorKind.INVALID_URL: "{field} is not a valid absolute URL: {value!r}",
    ErrorKind.EMPTY_ATTACHMENT_NAME: "attachment filename must not be empty",
    ErrorKind.ATTACHMENT_EXTENSION_MISSING: "attachment filename has no extension: {value!r}",
    ErrorKind.INVALID_TIMESTAMP: "timestamp is not ISO-8601: {value!r}",
    ErrorKind.COLOR_OUT_OF_RANGE: "color {value!r} is outside 0..={limit:#08x}",
    ErrorKind.TOO_MANY_FIELDS: "embed would have {length} fields, limit is {limit}",
    ErrorKind.EMBED_TOO_LARGE: "embed text totals {length} characters, limit is {limit}",
}


class EmbedValidationError(ValueError):
    """An embed, or one of its parts, violates a platform constraint.

    Attributes:
        kind: Which constraint failed.
        field: The input that failed, e.g. ``"title"`` or ``"author.url"``.
        length: The offending length or count, when the constraint is a size.
        limit: The limit that was exceeded, when there is one.
        value: The offending value for non-size constraints (URLs, colors).
    """

    def __init__(
        self,
        kind: ErrorKind,
        field: str,
        *,
        length: int | None = None,
        limit: int | None = None,
        value: object = None,
    ) -> None:
        self.kind = kind
        self.field = field
        self.length = length
        self.limit = limit
        self.value = value
        super().__init__(
            _MESSAGES[kind].format(field=field, length=length, limit=limit, value=value)
        )

    def __repr__(self) -> str:
        return f"EmbedValidationError(kind={self.kind.value!r}, field={self.field!r})"


class BuilderConsumedError(Exception):
    """Raised when an embed builder is used after it has been built."""
