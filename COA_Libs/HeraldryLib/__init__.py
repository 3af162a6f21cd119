"""
HeraldryLib - Procedural coat of arms generation

Tincture palette and picker, asset providers, and the generation pipeline
that ties them to the image editing operations.
"""

from COA_Libs.HeraldryLib.tinctures import Tincture, pick_heraldry_tincture, tincture_for_draw
from COA_Libs.HeraldryLib.asset_provider import (
    AssetProvider,
    AssetSelection,
    AssetLibraryConfig,
    DirectoryAssetProvider,
    load_asset_library_config,
)
from COA_Libs.HeraldryLib.coat_of_arms_generator import (
    CoatOfArmsGenerator,
    GeneratedCoatOfArms,
    randomly_generate_coat_of_arms,
    generate_batch,
)

__all__ = [
    "Tincture",
    "pick_heraldry_tincture",
    "tincture_for_draw",
    "AssetProvider",
    "AssetSelection",
    "AssetLibraryConfig",
    "DirectoryAssetProvider",
    "load_asset_library_config",
    "CoatOfArmsGenerator",
    "GeneratedCoatOfArms",
    "randomly_generate_coat_of_arms",
    "generate_batch",
]
