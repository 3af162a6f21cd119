"""
Procedural coat of arms generation.

Layers are composed in this order:

    shield shape  <-  ordinary (recolored, resized to the shape)
                  <-  charge (recolored, centered, optional)

Sable in the ordinary becomes the first tincture. Unless the ordinary is
the solid variant, its white becomes a second, different tincture. Sable in
the charge becomes a third tincture different from both.

Classes:
    GeneratedCoatOfArms: Final image plus the tinctures that went into it
    CoatOfArmsGenerator: Runs the pipeline against an AssetProvider

Functions:
    randomly_generate_coat_of_arms: One-call generation returning the image
    generate_batch: Reproducible parallel generation of several emblems
"""

from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional
import concurrent.futures
import logging
import random

from COA_Libs.constants import WORKING_MODE
from COA_Libs.HeraldryLib.asset_provider import AssetProvider
from COA_Libs.HeraldryLib.tinctures import Tincture, pick_heraldry_tincture
from COA_Libs.ImageEditingLib.geometry import top_left_corner
from COA_Libs.ImageEditingLib.image_editing_ops import (
    frame_image,
    overlay_image,
    resize_image,
    switch_color,
)

logger = logging.getLogger(__name__)

ProviderFactory = Callable[[random.Random], AssetProvider]


@dataclass
class GeneratedCoatOfArms:
    """Result of one generation.

    Attributes:
        image: Final RGBA composite, same size as the shield shape
        ordinary_tinctures: Tinctures applied to the ordinary (1 or 2)
        charge_tincture: Tincture applied to the charge, None without a charge
    """
    image: Any
    ordinary_tinctures: List[Tincture] = field(default_factory=list)
    charge_tincture: Optional[Tincture] = None

    @property
    def has_charge(self) -> bool:
        return self.charge_tincture is not None


class CoatOfArmsGenerator:
    """Builds coats of arms from an asset provider and a random generator."""

    def __init__(self, asset_provider: AssetProvider, rng: Optional[random.Random] = None):
        self.asset_provider = asset_provider
        self.rng = rng if rng is not None else random.Random()

    def generate(self) -> GeneratedCoatOfArms:
        """
        Run the full pipeline once.

        Returns:
            GeneratedCoatOfArms with the composite and the tinctures used

        Raises:
            AssetNotFoundError: If the provider has no candidate for a layer
            InvalidDimensionError: If the charge is larger than the shield shape
        """
        ordinary_image, is_solid = self.asset_provider.pick_ordinary()
        ordinary_image = ordinary_image.convert(WORKING_MODE)
        colors_picked = self.colorize_ordinary(ordinary_image, is_solid)

        shape_image = self.asset_provider.pick_shield_shape()

        # many shield shapes do not share a uniform border, so fit exactly
        ordinary_resized = resize_image(ordinary_image, shape_image.width, shape_image.height)
        composite = frame_image(shape_image, ordinary_resized, True, top_left_corner())

        charge_image = self.asset_provider.pick_charge()
        if charge_image is None:
            logger.info(f"Generated {composite.width}x{composite.height} coat of arms without a charge")
            return GeneratedCoatOfArms(image=composite, ordinary_tinctures=colors_picked)

        # charges are authored with transparent backgrounds
        charge_image = charge_image.convert(WORKING_MODE)
        charge_tincture = pick_heraldry_tincture(colors_picked, self.rng)
        switch_color(charge_image, Tincture.SABLE.rgba, charge_tincture.rgba)

        composite = overlay_image(composite, charge_image)
        logger.info(f"Generated {composite.width}x{composite.height} coat of arms with a charge")
        return GeneratedCoatOfArms(
            image=composite,
            ordinary_tinctures=colors_picked,
            charge_tincture=charge_tincture,
        )

    def colorize_ordinary(self, ordinary_image: Any, is_solid: bool) -> List[Tincture]:
        """
        Recolor an ordinary in place and return the tinctures used.

        White is excluded from the first pick because white is the color the
        second switch replaces.
        """
        colors_picked: List[Tincture] = []

        first = pick_heraldry_tincture([Tincture.SOLID_WHITE], self.rng)
        switch_color(ordinary_image, Tincture.SABLE.rgba, first.rgba)
        colors_picked.append(first)

        if not is_solid:
            second = pick_heraldry_tincture(colors_picked, self.rng)
            switch_color(ordinary_image, Tincture.SOLID_WHITE.rgba, second.rgba)
            colors_picked.append(second)

        return colors_picked


def randomly_generate_coat_of_arms(
    asset_provider: AssetProvider,
    rng: Optional[random.Random] = None,
) -> Any:
    """Generate one coat of arms and return just the image."""
    return CoatOfArmsGenerator(asset_provider, rng).generate().image


def generate_batch(
    provider_factory: ProviderFactory,
    count: int,
    seed: Optional[int] = None,
    max_workers: Optional[int] = None,
) -> List[GeneratedCoatOfArms]:
    """
    Generate several coats of arms in parallel.

    Each emblem gets its own random.Random (seeded with seed + index when a
    seed is given) and its own provider built from that generator, so no
    mutable state is shared between workers and a seeded batch is
    reproducible regardless of scheduling.

    Args:
        provider_factory: Builds an AssetProvider from a random generator
        count: Number of emblems (>= 0)
        seed: Base seed; None for unseeded generators
        max_workers: Maximum number of threads (default: None = CPU count)

    Returns:
        Results in index order

    Raises:
        ValueError: If count is negative
    """
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")

    def build_one(index: int) -> GeneratedCoatOfArms:
        rng = random.Random(seed + index) if seed is not None else random.Random()
        return CoatOfArmsGenerator(provider_factory(rng), rng).generate()

    results: List[Optional[GeneratedCoatOfArms]] = [None] * count
    with concurrent.futures.ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = {executor.submit(build_one, index): index for index in range(count)}
        for future in concurrent.futures.as_completed(futures):
            results[futures[future]] = future.result()

    logger.info(f"Generated batch of {count} coats of arms")
    return results
