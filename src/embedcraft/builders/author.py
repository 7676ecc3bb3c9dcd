"""Embed author builder."""

from __future__ import annotations

from embedcraft.errors import ErrorKind
from embedcraft.limits import AUTHOR_NAME_LENGTH_LIMIT
from embedcraft.models import AuthorData, ImageSource
from embedcraft.validation import check_text, check_url


class AuthorBuilder:
    """Build the author block of an embed.

    The name is validated on creation and the URL when it is set; a failed
    ``url()`` call leaves the builder as it was.
    """

    def __init__(self, name: str) -> None:
        check_text(
            name,
            field="author.name",
            limit=AUTHOR_NAME_LENGTH_LIMIT,
            empty=ErrorKind.AUTHOR_NAME_EMPTY,
            too_long=ErrorKind.AUTHOR_NAME_TOO_LONG,
        )
        self._name = name
        self._url: str | None = None
        self._icon: ImageSource | None = None

    def url(self, url: str) -> AuthorBuilder:
        check_url(url, field="author.url")
        self._url = url
        return self

    def icon(self, source: ImageSource) -> AuthorBuilder:
        self._icon = source
        return self

    def build(self) -> AuthorData:
        return AuthorData(name=self._name, url=self._url, icon=self._icon)
