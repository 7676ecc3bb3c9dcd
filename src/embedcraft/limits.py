"""Size limits imposed by the Discord embed API.

These are the remote service's documented limits. Lengths are counted in
Unicode code points, i.e. ``len(text)``.
"""

from __future__ import annotations

TITLE_LENGTH_LIMIT = 256
DESCRIPTION_LENGTH_LIMIT = 4096
FIELD_NAME_LENGTH_LIMIT = 256
FIELD_VALUE_LENGTH_LIMIT = 1024
FOOTER_TEXT_LENGTH_LIMIT = 2048
AUTHOR_NAME_LENGTH_LIMIT = 256

FIELD_COUNT_LIMIT = 25

# Title + description + field names/values + footer text + author name.
EMBED_LENGTH_LIMIT = 6000

COLOR_MAXIMUM = 0xFFFFFF
