"""
Heraldic tinctures and the constrained random tincture picker.

The palette is a flat, closed set of ten colors. Metals (Or, white) are
not treated specially: the only constraint is that a pick never repeats a
color the caller has excluded, so adjacent layers always differ.
"""

from enum import Enum
from typing import Any, Iterable, Optional
import logging
import random

from COA_Libs.constants import (
    AZURE_RGBA,
    GULES_RGBA,
    MURREY_RGBA,
    OR_RGBA,
    PURPURE_RGBA,
    SABLE_RGBA,
    SANGUINE_RGBA,
    SOLID_WHITE_RGBA,
    TENNE_RGBA,
    TINCTURE_BAND_WIDTH,
    TINCTURE_DRAW_MAX,
    TINCTURE_DRAW_MIN,
    VERT_RGBA,
)
from COA_Libs.ImageEditingLib.image_models import RgbaColor, normalize_color

logger = logging.getLogger(__name__)


class Tincture(Enum):
    """Heraldic palette, in draw-band order."""
    AZURE = AZURE_RGBA
    GULES = GULES_RGBA
    MURREY = MURREY_RGBA
    SANGUINE = SANGUINE_RGBA
    OR = OR_RGBA
    VERT = VERT_RGBA
    PURPURE = PURPURE_RGBA
    TENNE = TENNE_RGBA
    SOLID_WHITE = SOLID_WHITE_RGBA
    SABLE = SABLE_RGBA

    @property
    def rgba(self) -> RgbaColor:
        return self.value


def tincture_for_draw(draw: int) -> Tincture:
    """
    Map a draw from [1, 100) onto its band.

    Bands are 1-9, 10-19, ..., 90-99, one per tincture in palette order.

    Raises:
        ValueError: If draw is outside [1, 100)
    """
    if not (TINCTURE_DRAW_MIN <= draw < TINCTURE_DRAW_MAX):
        raise ValueError(
            f"Tincture draw must be in [{TINCTURE_DRAW_MIN}, {TINCTURE_DRAW_MAX}), got {draw}"
        )
    return list(Tincture)[draw // TINCTURE_BAND_WIDTH]


def pick_heraldry_tincture(
    exclude_colors: Iterable[Any] = (),
    rng: Optional[random.Random] = None,
) -> Tincture:
    """
    Pick a random tincture that is not excluded.

    Keeps drawing from the full range until a band lands on a color that is
    not excluded. Excluded bands are rejected and redrawn, never folded into
    their neighbours, so with exclusions the remaining colors are not
    necessarily equally likely.

    Args:
        exclude_colors: Tinctures (or RGBA colors) used so far; empty for no exclusions
        rng: random.Random-compatible generator; None uses a fresh one

    Returns:
        A Tincture not in exclude_colors

    Raises:
        ValueError: If every tincture is excluded
    """
    excluded = {_rgba_of(color) for color in exclude_colors}
    if all(tincture.rgba in excluded for tincture in Tincture):
        raise ValueError("Every tincture is excluded; nothing left to pick")

    if rng is None:
        rng = random.Random()

    while True:
        tincture = tincture_for_draw(rng.randrange(TINCTURE_DRAW_MIN, TINCTURE_DRAW_MAX))
        if tincture.rgba not in excluded:
            logger.debug(f"Picked tincture {tincture.name}")
            return tincture


def _rgba_of(color: Any) -> RgbaColor:
    if isinstance(color, Tincture):
        return color.rgba
    return normalize_color(color)
