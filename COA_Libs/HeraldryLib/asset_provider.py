"""
Asset providers for coat of arms generation.

An asset provider hands the generator its three raw layers. The generator
only depends on the AssetProvider protocol; DirectoryAssetProvider is the
file based implementation that picks at random from an asset library laid
out as:

    <base_directory>/
        OrdinaryFiles/      ordinaries, "Solid.png" is the one-color variant
        ShieldShapeFiles/   shield silhouettes with transparent interiors
        ChargesFiles/       charges, "blank.png" means "no charge"

Classes:
    AssetProvider: Protocol consumed by the generator
    AssetSelection: Which file was picked and what it means
    AssetLibraryConfig: Library location and naming conventions
    DirectoryAssetProvider: Random picks from an asset library on disk

Functions:
    load_asset_library_config: Read an AssetLibraryConfig from JSON
"""

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Any, Dict, List, Optional, Protocol, Tuple, runtime_checkable
import json
import logging
import random

from PIL import Image

from COA_Libs.constants import (
    ASSET_IMAGE_PATTERN,
    BLANK_CHARGE_FILE_NAME,
    CHARGES_FOLDER,
    ORDINARIES_FOLDER,
    SHIELD_SHAPES_FOLDER,
    SOLID_ORDINARY_FILE_NAME,
    WORKING_MODE,
)
from COA_Libs.errors import AssetNotFoundError

logger = logging.getLogger(__name__)


@runtime_checkable
class AssetProvider(Protocol):
    """Source of the raw layers for one coat of arms."""

    def pick_ordinary(self) -> Tuple[Any, bool]:
        """Return (ordinary image, is_solid_variant)."""
        ...

    def pick_shield_shape(self) -> Any:
        """Return a shield shape image."""
        ...

    def pick_charge(self) -> Optional[Any]:
        """Return a charge image, or None for the blank selection."""
        ...


@dataclass(frozen=True)
class AssetSelection:
    """A picked asset file and its meaning.

    Attributes:
        file_identifier: Path of the picked file
        is_solid_variant: Ordinary is one color only (no white to switch)
        is_blank_variant: Charge pick was the "no charge" placeholder
    """
    file_identifier: str
    is_solid_variant: bool = False
    is_blank_variant: bool = False


@dataclass
class AssetLibraryConfig:
    """Location and naming conventions of an asset library.

    Attributes:
        base_directory: Directory holding the three asset folders
        ordinaries_folder: Folder name for ordinaries
        shield_shapes_folder: Folder name for shield shapes
        charges_folder: Folder name for charges
        image_pattern: Glob pattern of asset files
        solid_file_name: Ordinary file name of the one-color variant
        blank_file_name: Charge file name meaning "no charge"
    """
    base_directory: str = "."
    ordinaries_folder: str = ORDINARIES_FOLDER
    shield_shapes_folder: str = SHIELD_SHAPES_FOLDER
    charges_folder: str = CHARGES_FOLDER
    image_pattern: str = ASSET_IMAGE_PATTERN
    solid_file_name: str = SOLID_ORDINARY_FILE_NAME
    blank_file_name: str = BLANK_CHARGE_FILE_NAME

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AssetLibraryConfig":
        """Create from dictionary, ignoring unknown keys."""
        filtered = {k: v for k, v in data.items() if k in cls.__dataclass_fields__}
        return cls(**filtered)

    @property
    def ordinaries_dir(self) -> Path:
        return Path(self.base_directory) / self.ordinaries_folder

    @property
    def shield_shapes_dir(self) -> Path:
        return Path(self.base_directory) / self.shield_shapes_folder

    @property
    def charges_dir(self) -> Path:
        return Path(self.base_directory) / self.charges_folder


def load_asset_library_config(config_path: Path) -> AssetLibraryConfig:
    """
    Read an AssetLibraryConfig from a JSON file.

    A relative base_directory is resolved against the config file's folder.

    Raises:
        OSError: If the file cannot be read
        ValueError: If the file is not a JSON object
    """
    config_path = Path(config_path)
    payload = json.loads(config_path.read_text(encoding="utf-8"))
    if not isinstance(payload, dict):
        raise ValueError(f"Asset library config must be a JSON object: {config_path}")

    config = AssetLibraryConfig.from_dict(payload)
    base = Path(config.base_directory)
    if not base.is_absolute():
        config.base_directory = str(config_path.parent / base)
    return config


class DirectoryAssetProvider:
    """Picks assets at random from an asset library on disk.

    Example:
        >>> provider = DirectoryAssetProvider(
        ...     AssetLibraryConfig(base_directory="/srv/heraldry"),
        ...     rng=random.Random(7),
        ... )
        >>> ordinary, is_solid = provider.pick_ordinary()
    """

    def __init__(self, config: AssetLibraryConfig, rng: Optional[random.Random] = None):
        self.config = config
        self.rng = rng if rng is not None else random.Random()

    def list_files(self, directory: Path) -> List[Path]:
        """Asset files in directory, sorted so picks are reproducible."""
        if not directory.is_dir():
            return []
        return sorted(p for p in directory.glob(self.config.image_pattern) if p.is_file())

    def pick_file(self, directory: Path) -> Path:
        """
        Pick one asset file at random.

        Raises:
            AssetNotFoundError: If no file matches the image pattern
        """
        files = self.list_files(directory)
        if not files:
            raise AssetNotFoundError(
                f"No image files of {self.config.image_pattern} found in directory {directory}"
            )

        picked = self.rng.choice(files)
        logger.debug(f"File picked is {picked}")
        return picked

    def select_ordinary(self) -> AssetSelection:
        picked = self.pick_file(self.config.ordinaries_dir)
        return AssetSelection(
            file_identifier=str(picked),
            is_solid_variant=picked.name == self.config.solid_file_name,
        )

    def select_shield_shape(self) -> AssetSelection:
        return AssetSelection(file_identifier=str(self.pick_file(self.config.shield_shapes_dir)))

    def select_charge(self) -> AssetSelection:
        picked = self.pick_file(self.config.charges_dir)
        return AssetSelection(
            file_identifier=str(picked),
            is_blank_variant=picked.name == self.config.blank_file_name,
        )

    def pick_ordinary(self) -> Tuple[Any, bool]:
        selection = self.select_ordinary()
        return load_asset_image(selection.file_identifier), selection.is_solid_variant

    def pick_shield_shape(self) -> Any:
        return load_asset_image(self.select_shield_shape().file_identifier)

    def pick_charge(self) -> Optional[Any]:
        selection = self.select_charge()
        if selection.is_blank_variant:
            return None
        return load_asset_image(selection.file_identifier)


def load_asset_image(file_path: str) -> Any:
    """Open an asset file as a detached RGBA image."""
    with Image.open(file_path) as img:
        return img.convert(WORKING_MODE)
