"""
Core image editing operations for Coat of Arms Core.

This module provides the low-level raster operations the generator is built
from: exact-match color switching, high quality resizing, and the two
centered compositing primitives.

Functions:
    switch_color: Replace one exact RGBA color with another, in place
    apply_remap_table: Apply several ColorRemapRules in one pass, in place
    resize_image: Resize to exact dimensions with bicubic filtering
    frame_image: Draw a picture, then a (partly transparent) frame over it
    overlay_image: Draw a smaller image centered over a larger one
"""

import math
from typing import Any, Iterable

import numpy as np
from PIL import Image

from COA_Libs.constants import WORKING_MODE
from COA_Libs.errors import InvalidDimensionError
from COA_Libs.ImageEditingLib.geometry import calc_centered_point, top_left_corner
from COA_Libs.ImageEditingLib.image_models import (
    ColorRemapRule,
    Point,
    RgbaColor,
    normalize_color,
)

# Bicubic kernel reaches 2 source pixels either side at scale 1
BICUBIC_SUPPORT = 2.0


def switch_color(image: Any, old_color: RgbaColor, new_color: RgbaColor) -> None:
    """
    Switch all pixels of one color to another, in place.

    Matching is exact on all four channels, so a half transparent black is
    not "black". The new color's alpha is written too: opaque black switched
    to a translucent color becomes translucent.

    Args:
        image: RGBA PIL Image, modified in place
        old_color: RGBA color to replace
        new_color: RGBA color to write

    Raises:
        ValueError: If the image is not RGBA
    """
    old_color = normalize_color(old_color)
    new_color = normalize_color(new_color)
    if old_color == new_color:
        # no real color change
        return

    apply_remap_table(image, [ColorRemapRule(old_color, new_color)])


def apply_remap_table(image: Any, rules: Iterable[ColorRemapRule]) -> None:
    """
    Apply a remap table to an image in place.

    Every rule is matched against the pixels as they were before the call,
    so a rule's output is never picked up by a later rule.

    Args:
        image: RGBA PIL Image, modified in place
        rules: ColorRemapRules; identity rules are skipped

    Raises:
        ValueError: If the image is not RGBA
    """
    rules = [rule for rule in rules if not rule.is_identity]
    if not rules:
        return

    _require_rgba(image, "apply_remap_table")

    source = np.array(image)
    remapped = source.copy()
    for rule in rules:
        match = np.all(source == np.array(rule.old_color, dtype=np.uint8), axis=-1)
        remapped[match] = rule.new_color

    image.paste(Image.fromarray(remapped))


def resize_image(image: Any, width: int, height: int) -> Any:
    """
    High quality resize of an image to exactly width x height.

    The source is padded with a mirrored copy of its own border before
    resampling, so the bicubic kernel never reads past the edge into
    transparent black. Resolution (dpi) is carried from the source.

    Args:
        image: PIL Image to resize (converted to RGBA)
        width: Target width in pixels (> 0)
        height: Target height in pixels (> 0)

    Returns:
        New RGBA PIL Image of the requested size

    Raises:
        InvalidDimensionError: If a target or source dimension is not positive
    """
    if width <= 0 or height <= 0:
        raise InvalidDimensionError(f"Resize target must be positive, got {width}x{height}")

    source = _as_rgba(image)
    src_width, src_height = source.size
    if src_width <= 0 or src_height <= 0:
        raise InvalidDimensionError(f"Cannot resize an empty {src_width}x{src_height} image")

    pad_x = _mirror_padding(src_width, width)
    pad_y = _mirror_padding(src_height, height)

    padded = np.pad(
        np.asarray(source),
        ((pad_y, pad_y), (pad_x, pad_x), (0, 0)),
        mode="symmetric",
    )
    resized = Image.fromarray(padded).resize(
        (width, height),
        Image.Resampling.BICUBIC,
        box=(pad_x, pad_y, pad_x + src_width, pad_y + src_height),
    )

    _carry_resolution(image, resized)
    return resized


def frame_image(
    frame: Any,
    picture: Any,
    should_center: bool = True,
    start_point: Point = (0, 0),
) -> Any:
    """
    Create a composite of a frame with a picture inside it.

    Assumes:
        1) the frame is at least as large as the picture when centering
        2) the frame may crop the edges of the picture
        3) the frame is transparent in its interior

    Args:
        frame: Frame PIL Image, drawn last at the origin
        picture: Interior PIL Image, drawn first
        should_center: Center the picture (start_point is ignored)
        start_point: Top-left of the picture when not centering; may be
                     negative or overhang, the excess is clipped

    Returns:
        New RGBA PIL Image with the frame's dimensions

    Raises:
        InvalidDimensionError: If centering and the picture exceeds the frame
    """
    frame = _as_rgba(frame)
    picture = _as_rgba(picture)

    if should_center:
        start_point = calc_centered_point(frame.size, picture.size)

    composite = Image.new(WORKING_MODE, frame.size, (0, 0, 0, 0))
    _composite_at(composite, picture, start_point)         # picture inside
    _composite_at(composite, frame, top_left_corner())     # frame over it

    _carry_resolution(frame, composite)
    return composite


def overlay_image(background: Any, foreground: Any) -> Any:
    """
    Create a composite of a smaller image centered over a larger one.

    Args:
        background: Larger PIL Image, drawn at the origin
        foreground: Smaller PIL Image, alpha composited centered

    Returns:
        New RGBA PIL Image with the background's dimensions

    Raises:
        InvalidDimensionError: If the foreground exceeds the background on either axis
    """
    background = _as_rgba(background)
    foreground = _as_rgba(foreground)

    centered = calc_centered_point(background.size, foreground.size)

    composite = Image.new(WORKING_MODE, background.size, (0, 0, 0, 0))
    _composite_at(composite, background, top_left_corner())
    _composite_at(composite, foreground, centered)

    _carry_resolution(background, composite)
    return composite


def _composite_at(canvas: Any, layer: Any, point: Point) -> None:
    """Alpha composite layer onto canvas at point, clipping anything off-canvas."""
    x, y = int(point[0]), int(point[1])
    source_left = max(0, -x)
    source_top = max(0, -y)

    if source_left >= layer.width or source_top >= layer.height:
        return
    if x >= canvas.width or y >= canvas.height:
        return

    canvas.alpha_composite(layer, dest=(max(0, x), max(0, y)), source=(source_left, source_top))


def _mirror_padding(source_length: int, target_length: int) -> int:
    scale = source_length / float(target_length)
    return int(math.ceil(BICUBIC_SUPPORT * max(1.0, scale))) + 1


def _as_rgba(image: Any) -> Any:
    if not hasattr(image, "mode") or not hasattr(image, "convert"):
        raise TypeError(f"Expected PIL Image, got {type(image)}")
    return image if image.mode == WORKING_MODE else image.convert(WORKING_MODE)


def _require_rgba(image: Any, operation: str) -> None:
    if not hasattr(image, "mode"):
        raise TypeError(f"Expected PIL Image, got {type(image)}")
    if image.mode != WORKING_MODE:
        raise ValueError(f"{operation} works in place and needs an RGBA image, got {image.mode}")


def _carry_resolution(source: Any, target: Any) -> None:
    dpi = getattr(source, "info", {}).get("dpi")
    if dpi is not None:
        target.info["dpi"] = dpi
