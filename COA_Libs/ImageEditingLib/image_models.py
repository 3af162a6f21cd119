"""
Image editing data models for Coat of Arms Core.

This module defines core data structures used throughout the image editing system.

Classes:
    ColorRemapRule: A single exact-match color substitution

Type Aliases:
    RgbaColor: A tuple of 4 integers representing RGBA color values (0-255)
    Point: An (x, y) pixel coordinate
"""

from dataclasses import dataclass
from typing import Any, Dict, Tuple

RgbaColor = Tuple[int, int, int, int]
Point = Tuple[int, int]


def normalize_color(color: Any) -> RgbaColor:
    """
    Coerce an RGB or RGBA sequence into an RGBA tuple.

    Args:
        color: 3 or 4 channel sequence of ints 0-255 (RGB gets alpha 255)

    Returns:
        RGBA tuple

    Raises:
        ValueError: If the channel count or a channel value is invalid
    """
    channels = tuple(int(c) for c in color)
    if len(channels) == 3:
        channels = channels + (255,)
    if len(channels) != 4:
        raise ValueError(f"Expected RGB or RGBA color, got {color!r}")
    for channel in channels:
        if not (0 <= channel <= 255):
            raise ValueError(f"Color channels must be 0-255, got {color!r}")
    return channels


@dataclass(frozen=True)
class ColorRemapRule:
    """Replace every pixel exactly equal to old_color with new_color.

    Attributes:
        old_color: RGBA color to match (all four channels)
        new_color: RGBA color written in its place, alpha included
    """
    old_color: RgbaColor
    new_color: RgbaColor

    def __post_init__(self):
        object.__setattr__(self, "old_color", normalize_color(self.old_color))
        object.__setattr__(self, "new_color", normalize_color(self.new_color))

    @property
    def is_identity(self) -> bool:
        return self.old_color == self.new_color

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {"old_color": list(self.old_color), "new_color": list(self.new_color)}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ColorRemapRule":
        """Create from dictionary."""
        return cls(old_color=tuple(data["old_color"]), new_color=tuple(data["new_color"]))
