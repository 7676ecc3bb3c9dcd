"""embedcraft: validating builder for Discord message embeds.

Assemble an embed with ``EmbedBuilder`` and get back an immutable
``EmbedDocument`` whose ``to_payload()`` the Discord API will accept, or an
``EmbedValidationError`` naming the limit that was broken.
"""

from embedcraft.builders import AuthorBuilder, EmbedBuilder, FieldBuilder, FooterBuilder
from embedcraft.errors import BuilderConsumedError, EmbedValidationError, ErrorKind
from embedcraft.models import (
    AuthorData,
    EmbedDocument,
    FieldData,
    FooterData,
    ImageSource,
    ImageSourceKind,
)

__all__ = [
    "AuthorBuilder",
    "AuthorData",
    "BuilderConsumedError",
    "EmbedBuilder",
    "EmbedDocument",
    "EmbedValidationError",
    "ErrorKind",
    "FieldBuilder",
    "FieldData",
    "FooterBuilder",
    "FooterData",
    "ImageSource",
    "ImageSourceKind",
]
