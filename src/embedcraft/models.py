"""Embed document models, the immutable output of the builders.

The models mirror the remote API's embed object. They are frozen, and they
carry the platform limits as field constraints, so an invalid document cannot
be constructed even without going through a builder (direct construction
raises ``pydantic.ValidationError`` instead of ``EmbedValidationError``).
"""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from embedcraft.limits import (
    AUTHOR_NAME_LENGTH_LIMIT,
    COLOR_MAXIMUM,
    DESCRIPTION_LENGTH_LIMIT,
    EMBED_LENGTH_LIMIT,
    FIELD_COUNT_LIMIT,
    FIELD_NAME_LENGTH_LIMIT,
    FIELD_VALUE_LENGTH_LIMIT,
    FOOTER_TEXT_LENGTH_LIMIT,
    TITLE_LENGTH_LIMIT,
)
from embedcraft.validation import (
    IMAGE_URL_SCHEMES,
    check_attachment,
    check_url,
    normalize_timestamp,
    total_text_length,
)

ATTACHMENT_SCHEME = "attachment://"


class ImageSourceKind(StrEnum):
    URL = "url"
    ATTACHMENT = "attachment"


class ImageSource(BaseModel):
    """Where an image comes from: a remote URL or a file uploaded with the message.

    Use ``ImageSource.url`` or ``ImageSource.attachment`` rather than the
    constructor; they raise ``EmbedValidationError`` on bad input.
    """

    model_config = ConfigDict(frozen=True)

    kind: ImageSourceKind
    value: str

    @model_validator(mode="after")
    def _check_value(self) -> ImageSource:
        if self.kind is ImageSourceKind.URL:
            check_url(self.value, field="image.url", schemes=IMAGE_URL_SCHEMES)
        else:
            check_attachment(self.value, field="image.attachment")
        return self

    @classmethod
    def url(cls, url: str) -> ImageSource:
        """An image at an absolute ``http``/``https`` URL."""
        check_url(url, field="image.url", schemes=IMAGE_URL_SCHEMES)
        return cls(kind=ImageSourceKind.URL, value=url)

    @classmethod
    def attachment(cls, filename: str) -> ImageSource:
        """An image uploaded alongside the message as ``filename``.

        The file is resolved by the remote service at send time; nothing here
        checks that it exists.
        """
        check_attachment(filename, field="image.attachment")
        return cls(kind=ImageSourceKind.ATTACHMENT, value=filename)

    @property
    def resolved(self) -> str:
        """The string the remote API expects in an ``url``/``icon_url`` slot."""
        if self.kind is ImageSourceKind.ATTACHMENT:
            return f"{ATTACHMENT_SCHEME}{self.value}"
        return self.value

    def to_payload(self) -> dict[str, Any]:
        return {"url": self.resolved}


class FieldData(BaseModel):
    """A single name/value pair, optionally rendered inline."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1, max_length=FIELD_NAME_LENGTH_LIMIT)
    value: str = Field(min_length=1, max_length=FIELD_VALUE_LENGTH_LIMIT)
    inline: bool = False

    def to_payload(self) -> dict[str, Any]:
        return {"name": self.name, "value": self.value, "inline": self.inline}


class FooterData(BaseModel):
    """Footer text with an optional icon."""

    model_config = ConfigDict(frozen=True)

    text: str = Field(min_length=1, max_length=FOOTER_TEXT_LENGTH_LIMIT)
    icon: ImageSource | None = None

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"text": self.text}
        if self.icon is not None:
            payload["icon_url"] = self.icon.resolved
        return payload


class AuthorData(BaseModel):
    """The author block shown at the top of an embed."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1, max_length=AUTHOR_NAME_LENGTH_LIMIT)
    url: str | None = None
    icon: ImageSource | None = None

    @model_validator(mode="after")
    def _check_url(self) -> AuthorData:
        if self.url is not None:
            check_url(self.url, field="author.url")
        return self

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"name": self.name}
        if self.url is not None:
            payload["url"] = self.url
        if self.icon is not None:
            payload["icon_url"] = self.icon.resolved
        return payload


class EmbedDocument(BaseModel):
    """A finished, validated embed. Immutable.

    ``to_payload()`` gives the plain dict the remote API's JSON schema
    accepts; encoding and sending it is the API client's job.
    """

    model_config = ConfigDict(frozen=True)

    title: Annotated[str, Field(min_length=1, max_length=TITLE_LENGTH_LIMIT)] | None = None
    description: (
        Annotated[str, Field(min_length=1, max_length=DESCRIPTION_LENGTH_LIMIT)] | None
    ) = None
    url: str | None = None
    timestamp: str | None = None
    color: Annotated[int, Field(ge=0, le=COLOR_MAXIMUM)] | None = None
    footer: FooterData | None = None
    image: ImageSource | None = None
    thumbnail: ImageSource | None = None
    author: AuthorData | None = None
    fields: tuple[FieldData, ...] = Field(default=(), max_length=FIELD_COUNT_LIMIT)

    @model_validator(mode="after")
    def _check_document(self) -> EmbedDocument:
        if self.url is not None:
            check_url(self.url, field="url")
        if self.timestamp is not None:
            normalize_timestamp(self.timestamp)
        total = self.total_length()
        if total > EMBED_LENGTH_LIMIT:
            msg = f"embed text totals {total} characters, limit is {EMBED_LENGTH_LIMIT}"
            raise ValueError(msg)
        return self

    def total_length(self) -> int:
        """Characters counted toward the platform-wide embed budget."""
        return embed_text_length(
            title=self.title,
            description=self.description,
            fields=self.fields,
            footer=self.footer,
            author=self.author,
        )

    def to_payload(self) -> dict[str, Any]:
        """Return the embed as the remote API's JSON object, unset keys omitted."""
        payload: dict[str, Any] = {"type": "rich"}
        if self.title is not None:
            payload["title"] = self.title
        if self.description is not None:
            payload["description"] = self.description
        if self.url is not None:
            payload["url"] = self.url
        if self.timestamp is not None:
            payload["timestamp"] = self.timestamp
        if self.color is not None:
            payload["color"] = self.color
        if self.footer is not None:
            payload["footer"] = self.footer.to_payload()
        if self.image is not None:
            payload["image"] = self.image.to_payload()
        if self.thumbnail is not None:
            payload["thumbnail"] = self.thumbnail.to_payload()
        if self.author is not None:
            payload["author"] = self.author.to_payload()
        if self.fields:
            payload["fields"] = [field.to_payload() for field in self.fields]
        return payload


def embed_text_length(
    *,
    title: str | None,
    description: str | None,
    fields: tuple[FieldData, ...] | list[FieldData],
    footer: FooterData | None,
    author: AuthorData | None,
) -> int:
    """Sum every text part that counts toward ``EMBED_LENGTH_LIMIT``."""
    parts: list[str | None] = [title, description]
    for field in fields:
        parts.append(field.name)
        parts.append(field.value)
    parts.append(footer.text if footer is not None else None)
    parts.append(author.name if author is not None else None)
    return total_text_length(parts)
