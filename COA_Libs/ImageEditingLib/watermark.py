"""
Translucent text watermarks.

The watermark is a single line of text centered horizontally, either in the
band above a container's top edge or flush with the bottom of the image.

Example:
    >>> from PIL import Image, ImageFont
    >>> img = Image.new("RGBA", (400, 300), "white")
    >>> draw_watermark(
    ...     img,
    ...     at_top=False,
    ...     watermark_text=watermark_copyright("Heralds Guild"),
    ...     watermark_font=ImageFont.load_default(),
    ...     watermark_color=(0, 0, 0),
    ...     container_top=0,
    ...     opacity_choice="25%",
    ... )
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional, Tuple, Union
import logging

from PIL import Image, ImageDraw, ImageFont

from COA_Libs.constants import (
    COPYRIGHT_SYMBOL,
    DEFAULT_COPYRIGHT_HOLDER,
    DEFAULT_OPACITY,
    OPACITY_TABLE,
    WORKING_MODE,
)
from COA_Libs.ImageEditingLib.image_models import Point, RgbaColor, normalize_color

logger = logging.getLogger(__name__)


class Opacity(Enum):
    """Opacity choices offered for watermarks."""
    FULL = "100%"
    THREE_QUARTERS = "75%"
    HALF = "50%"
    QUARTER = "25%"
    TENTH = "10%"

    @property
    def alpha(self) -> int:
        return OPACITY_TABLE[self.value]


def calc_opacity(opacity_choice: Union[str, Opacity, None]) -> int:
    """
    Map an opacity choice to an 8-bit alpha.

    Unrecognized choices fall back to 50% (127) rather than failing.
    """
    if isinstance(opacity_choice, Opacity):
        return opacity_choice.alpha
    return OPACITY_TABLE.get(opacity_choice, DEFAULT_OPACITY)


def build_watermark_color(opacity: int, watermark_color: Any) -> RgbaColor:
    """The watermark color with its alpha replaced by opacity."""
    r, g, b, _ = normalize_color(watermark_color)
    return (r, g, b, opacity)


def watermark_copyright(company_name: str = DEFAULT_COPYRIGHT_HOLDER, year: Optional[int] = None) -> str:
    """Copyright line to put on the bottom of images."""
    if year is None:
        year = datetime.now().year
    return f"{company_name} {COPYRIGHT_SYMBOL} {year}, All Rights Reserved"


def measure_text(image: Any, watermark_text: str, watermark_font: Any) -> Tuple[int, int, int, int]:
    """
    Measure text as it would be drawn on image.

    Returns:
        (left, top, width, height) where left/top are the ink offsets from
        the drawing origin
    """
    left, top, right, bottom = ImageDraw.Draw(image).textbbox(
        (0, 0), watermark_text, font=watermark_font
    )
    return int(left), int(top), int(right - left), int(bottom - top)


def calc_start_text_position(
    image: Any,
    at_top: bool,
    watermark_text: str,
    watermark_font: Any,
    container_top: int,
) -> Point:
    """Top-left of the watermark text box, whether on top or bottom."""
    _, _, text_width, text_height = measure_text(image, watermark_text, watermark_font)

    x = int(image.width - text_width) // 2
    if at_top:
        y = int(container_top + text_height) // 2
    else:
        y = int(image.height - text_height)

    return x, y


def draw_watermark(
    image: Any,
    at_top: bool,
    watermark_text: str,
    watermark_font: Any,
    watermark_color: Any,
    container_top: int,
    opacity_choice: Union[str, Opacity, None],
) -> None:
    """
    Draw a watermark onto an image, in place.

    Args:
        image: RGBA or RGB PIL Image to watermark
        at_top: Put the watermark near the top instead of the bottom
        watermark_text: Text of the watermark
        watermark_font: PIL font; None uses Pillow's default font
        watermark_color: RGB(A) color; its alpha is replaced by the opacity
        container_top: The container's top Y coordinate (only used at top)
        opacity_choice: One of the Opacity tokens ("100%", "75%", ...)

    Raises:
        ValueError: If the image mode cannot take a blended draw
    """
    if image.mode not in (WORKING_MODE, "RGB"):
        raise ValueError(f"Watermarks need an RGBA or RGB image, got {image.mode}")

    if watermark_font is None:
        watermark_font = ImageFont.load_default()

    fill = build_watermark_color(calc_opacity(opacity_choice), watermark_color)
    left, top, _, _ = measure_text(image, watermark_text, watermark_font)
    x, y = calc_start_text_position(image, at_top, watermark_text, watermark_font, container_top)
    origin = (x - left, y - top)

    if image.mode == WORKING_MODE:
        layer = Image.new(WORKING_MODE, image.size, (0, 0, 0, 0))
        ImageDraw.Draw(layer).text(origin, watermark_text, font=watermark_font, fill=fill)
        image.alpha_composite(layer)
    else:
        ImageDraw.Draw(image, WORKING_MODE).text(origin, watermark_text, font=watermark_font, fill=fill)

    logger.debug(f"Watermark drawn at ({x}, {y}) with alpha {fill[3]}")


@dataclass
class WatermarkSpec:
    """Everything needed to place a watermark.

    Attributes:
        text: Watermark text
        font: PIL font object (None for Pillow's default font)
        color: RGB(A) color, alpha is replaced by the opacity
        opacity: Opacity token, e.g. "50%"
        at_top: Put the watermark near the top instead of the bottom
        container_top: Container top Y coordinate used for top placement
    """
    text: str
    font: Optional[Any] = None
    color: Tuple[int, ...] = (255, 255, 255, 255)
    opacity: str = Opacity.HALF.value
    at_top: bool = False
    container_top: int = 0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary (excludes the font object)."""
        return {
            "text": self.text,
            "font": None,
            "color": list(self.color),
            "opacity": self.opacity,
            "at_top": self.at_top,
            "container_top": self.container_top,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WatermarkSpec":
        """Create from dictionary."""
        filtered = {k: v for k, v in data.items() if k in cls.__dataclass_fields__}
        if "color" in filtered:
            filtered["color"] = tuple(filtered["color"])
        return cls(**filtered)


def apply_watermark(image: Any, watermark_spec: WatermarkSpec) -> None:
    """Draw the watermark described by watermark_spec onto image, in place."""
    draw_watermark(
        image,
        watermark_spec.at_top,
        watermark_spec.text,
        watermark_spec.font,
        watermark_spec.color,
        watermark_spec.container_top,
        watermark_spec.opacity,
    )
