"""Embed footer builder."""

from __future__ import annotations

from embedcraft.errors import ErrorKind
from embedcraft.limits import FOOTER_TEXT_LENGTH_LIMIT
from embedcraft.models import FooterData, ImageSource
from embedcraft.validation import check_text


class FooterBuilder:
    """Build an embed footer. The text is validated on creation."""

    def __init__(self, text: str) -> None:
        check_text(
            text,
            field="footer.text",
            limit=FOOTER_TEXT_LENGTH_LIMIT,
            empty=ErrorKind.FOOTER_TEXT_EMPTY,
            too_long=ErrorKind.FOOTER_TEXT_TOO_LONG,
        )
        self._text = text
        self._icon: ImageSource | None = None

    def icon(self, source: ImageSource) -> FooterBuilder:
        self._icon = source
        return self

    def build(self) -> FooterData:
        return FooterData(text=self._text, icon=self._icon)
