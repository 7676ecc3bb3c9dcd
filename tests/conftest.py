"""Shared test fixtures."""

import pytest

from embedcraft import FieldBuilder
from embedcraft.config import Settings
from embedcraft.models import FieldData


@pytest.fixture
def settings() -> Settings:
    """Test settings with defaults."""
    return Settings(embedcraft_log_level="DEBUG", embedcraft_default_color=None)


@pytest.fixture
def max_field() -> FieldData:
    """A field whose name and value are both at their length limits."""
    return FieldBuilder("n" * 256, "v" * 1024).build()
