"""Convert embed documents into discord.py embeds."""

from __future__ import annotations

import discord

from embedcraft.models import EmbedDocument


def to_discord_embed(document: EmbedDocument) -> discord.Embed:
    """Build a ``discord.Embed`` carrying exactly the document's parts.

    Attachment images come through as ``attachment://<filename>`` URLs;
    upload the matching ``discord.File`` in the same send call.
    """
    return discord.Embed.from_dict(document.to_payload())
