"""
ImageEditingLib - Core image editing functionality

This module provides the color remapping, resizing, compositing and
watermarking operations for Coat of Arms Core.
"""

from COA_Libs.ImageEditingLib.image_models import ColorRemapRule, Point, RgbaColor
from COA_Libs.ImageEditingLib.geometry import calc_center, calc_centered_point, top_left_corner
from COA_Libs.ImageEditingLib.image_editing_ops import (
    switch_color,
    apply_remap_table,
    resize_image,
    frame_image,
    overlay_image,
)
from COA_Libs.ImageEditingLib.watermark import (
    Opacity,
    WatermarkSpec,
    calc_opacity,
    draw_watermark,
    apply_watermark,
    watermark_copyright,
)

__all__ = [
    "ColorRemapRule",
    "Point",
    "RgbaColor",
    "calc_center",
    "calc_centered_point",
    "top_left_corner",
    "switch_color",
    "apply_remap_table",
    "resize_image",
    "frame_image",
    "overlay_image",
    "Opacity",
    "WatermarkSpec",
    "calc_opacity",
    "draw_watermark",
    "apply_watermark",
    "watermark_copyright",
]
