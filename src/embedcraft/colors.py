"""Named Discord palette colors.

Plain integers, so they can be passed straight to ``EmbedBuilder.color``.
"""

from __future__ import annotations

BLURPLE = 0x5865F2  # Current brand blurple
GREEN = 0x57F287
YELLOW = 0xFEE75C
FUCHSIA = 0xEB459E
RED = 0xED4245
WHITE = 0xFFFFFF
BLACK = 0x000000

PALETTE: dict[str, int] = {
    "blurple": BLURPLE,
    "green": GREEN,
    "yellow": YELLOW,
    "fuchsia": FUCHSIA,
    "red": RED,
    "white": WHITE,
    "black": BLACK,
}
