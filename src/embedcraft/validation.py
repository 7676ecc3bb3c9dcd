"""Per-value checks shared by every builder.

Each check either returns normally or raises ``EmbedValidationError``. None of
them mutate anything, so builders run a check first and assign afterwards.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime

from pydantic import AnyUrl, TypeAdapter, ValidationError

from embedcraft.errors import EmbedValidationError, ErrorKind
from embedcraft.limits import COLOR_MAXIMUM

_URL_ADAPTER: TypeAdapter[AnyUrl] = TypeAdapter(AnyUrl)
_TEXT_ADAPTER: TypeAdapter[str] = TypeAdapter(str)

IMAGE_URL_SCHEMES = frozenset({"http", "https"})


def check_text(
    text: str,
    *,
    field: str,
    limit: int,
    empty: ErrorKind,
    too_long: ErrorKind,
) -> None:
    """Require ``1 <= len(text) <= limit`` and text pydantic can store."""
    if not text:
        raise EmbedValidationError(empty, field, length=0, limit=limit)
    check_unicode(text, field=field)
    length = len(text)
    if length > limit:
        raise EmbedValidationError(too_long, field, length=length, limit=limit)


def check_unicode(text: str, *, field: str) -> None:
    """Require a real ``str`` that encodes cleanly, e.g. no lone surrogates."""
    try:
        _TEXT_ADAPTER.validate_python(text)
    except ValidationError as exc:
        raise EmbedValidationError(ErrorKind.INVALID_TEXT, field) from exc


def check_url(url: str, *, field: str, schemes: frozenset[str] | None = None) -> None:
    """Require an absolute URL with a scheme and a host.

    Syntactic only; the URL is never fetched. When ``schemes`` is given the
    URL's scheme must be one of them.
    """
    if not isinstance(url, str) or not url:
        raise EmbedValidationError(ErrorKind.INVALID_URL, field, value=url)
    # The parser would quietly strip or encode these, judging a different URL.
    if any(ch.isspace() or ord(ch) < 0x20 or ord(ch) == 0x7F for ch in url):
        raise EmbedValidationError(ErrorKind.INVALID_URL, field, value=url)
    try:
        parsed = _URL_ADAPTER.validate_python(url)
    except ValidationError as exc:
        raise EmbedValidationError(ErrorKind.INVALID_URL, field, value=url) from exc
    if not parsed.host:
        raise EmbedValidationError(ErrorKind.INVALID_URL, field, value=url)
    if schemes is not None and parsed.scheme not in schemes:
        raise EmbedValidationError(ErrorKind.INVALID_URL, field, value=url)


def check_attachment(filename: str, *, field: str) -> None:
    """Require a non-empty filename with an extension, e.g. ``cat.png``."""
    if not filename:
        raise EmbedValidationError(ErrorKind.EMPTY_ATTACHMENT_NAME, field, value=filename)
    check_unicode(filename, field=field)
    _, dot, extension = filename.rpartition(".")
    if not dot or not extension:
        raise EmbedValidationError(
            ErrorKind.ATTACHMENT_EXTENSION_MISSING, field, value=filename
        )


def check_color(color: int, *, field: str = "color") -> None:
    """Require an RGB integer in ``0..=0xFFFFFF``."""
    if isinstance(color, bool) or not isinstance(color, int):
        raise EmbedValidationError(
            ErrorKind.COLOR_OUT_OF_RANGE, field, limit=COLOR_MAXIMUM, value=color
        )
    if not 0 <= color <= COLOR_MAXIMUM:
        raise EmbedValidationError(
            ErrorKind.COLOR_OUT_OF_RANGE, field, limit=COLOR_MAXIMUM, value=color
        )


def normalize_timestamp(timestamp: datetime | str, *, field: str = "timestamp") -> str:
    """Return the ISO-8601 string to store for ``timestamp``.

    Datetimes are rendered with ``isoformat()``. Strings are kept exactly as
    given once they parse.
    """
    if isinstance(timestamp, datetime):
        return timestamp.isoformat()
    if not isinstance(timestamp, str) or not timestamp:
        raise EmbedValidationError(ErrorKind.INVALID_TIMESTAMP, field, value=timestamp)
    try:
        datetime.fromisoformat(timestamp)
    except ValueError as exc:
        raise EmbedValidationError(
            ErrorKind.INVALID_TIMESTAMP, field, value=timestamp
        ) from exc
    return timestamp


def total_text_length(parts: Iterable[str | None]) -> int:
    """Sum the lengths of the text parts that count toward the embed budget."""
    return sum(len(part) for part in parts if part)
