"""
Placement helpers for compositing one image inside another.
"""

from typing import Tuple

from COA_Libs.ImageEditingLib.image_models import Point
from COA_Libs.errors import InvalidDimensionError


def calc_center(outer: int, inner: int) -> int:
    """
    Offset that centers a length `inner` inside a length `outer`.

    A 50 pixel tall picture inside a 110 pixel frame starts at 30,
    leaving 30 above and 30 below.

    Raises:
        InvalidDimensionError: If inner is greater than outer
    """
    if inner > outer:
        raise InvalidDimensionError(
            f"calc_center: inner size {inner} is greater than outer size {outer}"
        )

    return 0 if outer == inner else (outer - inner) // 2


def calc_centered_point(outer_size: Tuple[int, int], inner_size: Tuple[int, int]) -> Point:
    """Centering offset on both axes for (width, height) sizes."""
    return (
        calc_center(outer_size[0], inner_size[0]),
        calc_center(outer_size[1], inner_size[1]),
    )


def top_left_corner() -> Point:
    return (0, 0)
