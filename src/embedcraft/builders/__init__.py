"""Fluent builders for embeds and their parts."""

from embedcraft.builders.author import AuthorBuilder
from embedcraft.builders.embed import EmbedBuilder
from embedcraft.builders.field import FieldBuilder
from embedcraft.builders.footer import FooterBuilder

__all__ = ["AuthorBuilder", "EmbedBuilder", "FieldBuilder", "FooterBuilder"]
