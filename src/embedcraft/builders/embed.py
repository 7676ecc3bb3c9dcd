"""The top-level embed builder.

Setters check their own input immediately and leave the builder untouched
when they raise. The one check that needs every part at once, the total text
budget, runs in ``build()``.

Builders are not internally synchronized; share one across threads only
behind your own lock.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import datetime
from typing import TYPE_CHECKING

from embedcraft.builders.author import AuthorBuilder
from embedcraft.builders.field import FieldBuilder
from embedcraft.builders.footer import FooterBuilder
from embedcraft.errors import BuilderConsumedError, EmbedValidationError, ErrorKind
from embedcraft.limits import (
    DESCRIPTION_LENGTH_LIMIT,
    EMBED_LENGTH_LIMIT,
    FIELD_COUNT_LIMIT,
    TITLE_LENGTH_LIMIT,
)
from embedcraft.models import (
    AuthorData,
    EmbedDocument,
    FieldData,
    FooterData,
    ImageSource,
    embed_text_length,
)
from embedcraft.validation import check_color, check_text, check_url, normalize_timestamp

if TYPE_CHECKING:
    from embedcraft.config import Settings

logger = logging.getLogger(__name__)


class EmbedBuilder:
    """Assemble an ``EmbedDocument`` one part at a time.

    Every setter returns the builder, so calls chain::

        document = (
            EmbedBuilder()
            .title("Release notes")
            .color(colors.BLURPLE)
            .field(FieldBuilder("Version", "1.4.0").inline())
            .build()
        )

    Singular parts are last-write-wins; fields are append-only. Once
    ``build()`` succeeds the builder is spent and every further call raises
    ``BuilderConsumedError``. Use ``copy()`` first to build the same state
    again.
    """

    def __init__(self) -> None:
        self._title: str | None = None
        self._description: str | None = None
        self._url: str | None = None
        self._timestamp: str | None = None
        self._color: int | None = None
        self._footer: FooterData | None = None
        self._image: ImageSource | None = None
        self._thumbnail: ImageSource | None = None
        self._author: AuthorData | None = None
        self._fields: list[FieldData] = []
        self._built = False

    @classmethod
    def from_settings(cls, settings: Settings) -> EmbedBuilder:
        """Start a builder with the configured defaults already applied."""
        builder = cls()
        if settings.embedcraft_default_color is not None:
            builder.color(settings.embedcraft_default_color)
        return builder

    def _ensure_accumulating(self) -> None:
        if self._built:
            raise BuilderConsumedError("this EmbedBuilder has already been built")

    # ------------------------------------------------------------------
    # Singular parts
    # ------------------------------------------------------------------

    def title(self, title: str) -> EmbedBuilder:
        self._ensure_accumulating()
        check_text(
            title,
            field="title",
            limit=TITLE_LENGTH_LIMIT,
            empty=ErrorKind.TITLE_EMPTY,
            too_long=ErrorKind.TITLE_TOO_LONG,
        )
        self._title = title
        return self

    def description(self, description: str) -> EmbedBuilder:
        self._ensure_accumulating()
        check_text(
            description,
            field="description",
            limit=DESCRIPTION_LENGTH_LIMIT,
            empty=ErrorKind.DESCRIPTION_EMPTY,
            too_long=ErrorKind.DESCRIPTION_TOO_LONG,
        )
        self._description = description
        return self

    def url(self, url: str) -> EmbedBuilder:
        """Link the title to ``url``, which must be absolute."""
        self._ensure_accumulating()
        check_url(url, field="url")
        self._url = url
        return self

    def color(self, color: int) -> EmbedBuilder:
        """Set the sidebar color as an RGB integer, ``0x000000``-``0xFFFFFF``."""
        self._ensure_accumulating()
        check_color(color)
        self._color = color
        return self

    def timestamp(self, timestamp: datetime | str) -> EmbedBuilder:
        """Set the footer timestamp.

        A datetime is stored as its ISO-8601 form; a string must already be
        ISO-8601 and is stored as given.
        """
        self._ensure_accumulating()
        self._timestamp = normalize_timestamp(timestamp)
        return self

    def footer(self, footer: FooterData | FooterBuilder) -> EmbedBuilder:
        self._ensure_accumulating()
        if isinstance(footer, FooterBuilder):
            footer = footer.build()
        self._footer = footer
        return self

    def image(self, source: ImageSource) -> EmbedBuilder:
        self._ensure_accumulating()
        self._image = source
        return self

    def thumbnail(self, source: ImageSource) -> EmbedBuilder:
        self._ensure_accumulating()
        self._thumbnail = source
        return self

    def author(self, author: AuthorData | AuthorBuilder) -> EmbedBuilder:
        self._ensure_accumulating()
        if isinstance(author, AuthorBuilder):
            author = author.build()
        self._author = author
        return self

    # ------------------------------------------------------------------
    # Fields
    # ------------------------------------------------------------------

    def field(self, field: FieldData | FieldBuilder) -> EmbedBuilder:
        """Append a field. Raises ``TOO_MANY_FIELDS`` on the 26th."""
        return self.fields([field])

    def fields(self, fields: Iterable[FieldData | FieldBuilder]) -> EmbedBuilder:
        """Append several fields; if they would not all fit, none are added."""
        self._ensure_accumulating()
        batch: list[FieldData] = []
        for f in fields:
            if isinstance(f, FieldBuilder):
                batch.append(f.build())
            elif isinstance(f, FieldData):
                batch.append(f)
            else:
                msg = f"expected FieldData or FieldBuilder, got {type(f).__name__}"
                raise TypeError(msg)
        count = len(self._fields) + len(batch)
        if count > FIELD_COUNT_LIMIT:
            raise EmbedValidationError(
                ErrorKind.TOO_MANY_FIELDS, "fields", length=count, limit=FIELD_COUNT_LIMIT
            )
        self._fields.extend(batch)
        return self

    # ------------------------------------------------------------------
    # Terminal operations
    # ------------------------------------------------------------------

    def total_length(self) -> int:
        """Characters currently counted toward the embed budget."""
        return embed_text_length(
            title=self._title,
            description=self._description,
            fields=self._fields,
            footer=self._footer,
            author=self._author,
        )

    def copy(self) -> EmbedBuilder:
        """Return an independent, unbuilt builder holding the same parts."""
        self._ensure_accumulating()
        clone = EmbedBuilder()
        clone._title = self._title
        clone._description = self._description
        clone._url = self._url
        clone._timestamp = self._timestamp
        clone._color = self._color
        clone._footer = self._footer
        clone._image = self._image
        clone._thumbnail = self._thumbnail
        clone._author = self._author
        clone._fields = list(self._fields)
        return clone

    def build(self) -> EmbedDocument:
        """Check the total text budget and return the finished document.

        Raises:
            EmbedValidationError: ``EMBED_TOO_LARGE`` carrying the computed
                total. The builder stays usable so the caller can trim it.
            BuilderConsumedError: if ``build()`` already succeeded.
        """
        self._ensure_accumulating()
        total = self.total_length()
        if total > EMBED_LENGTH_LIMIT:
            raise EmbedValidationError(
                ErrorKind.EMBED_TOO_LARGE, "embed", length=total, limit=EMBED_LENGTH_LIMIT
            )

        document = EmbedDocument(
            title=self._title,
            description=self._description,
            url=self._url,
            timestamp=self._timestamp,
            color=self._color,
            footer=self._footer,
            image=self._image,
            thumbnail=self._thumbnail,
            author=self._author,
            fields=tuple(self._fields),
        )
        self._built = True
        logger.debug("embed_built fields=%d total_length=%d", len(self._fields), total)
        return document
