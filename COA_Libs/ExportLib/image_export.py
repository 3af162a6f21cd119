"""
Image export for Coat of Arms Core.

Maps file names to image formats and encodes images with the settings each
format needs. JPEG is always written at quality 75; every other format
uses the encoder defaults.

Classes:
    ImageFormat: Closed set of supported output formats

Functions:
    get_extension: Extension of a file name without the leading period
    get_image_format: ImageFormat for a file name
    image_format_name: Display name of an ImageFormat
    encode_image: Encode an image to bytes
    save_image: Encode an image and write it to a file
    replace_extension: Swap a file name's extension
    is_jpg: Whether a file name has a .jpg extension
"""

from enum import Enum
from io import BytesIO
from pathlib import Path
from typing import Any, Dict, Optional
import logging

from COA_Libs.constants import DEFAULT_EXTENSION, JPEG_QUALITY
from COA_Libs.errors import EncodeFailureError, UnsupportedFormatError

logger = logging.getLogger(__name__)


class ImageFormat(Enum):
    """Supported output formats, valued by display name."""
    BMP = "BMP"
    GIF = "GIF"
    ICON = "Icon"
    WMF = "WMF"
    PNG = "PNG"
    EXIF = "EXIF"
    EMF = "EMF"
    JPEG = "Jpeg"
    TIFF = "Tiff"


EXTENSION_FORMATS: Dict[str, ImageFormat] = {
    "bmp": ImageFormat.BMP,
    "gif": ImageFormat.GIF,
    "ico": ImageFormat.ICON,
    "wmf": ImageFormat.WMF,
    "png": ImageFormat.PNG,
    "exif": ImageFormat.EXIF,
    "emf": ImageFormat.EMF,
    "jpg": ImageFormat.JPEG,
    "jpeg": ImageFormat.JPEG,
    "tif": ImageFormat.TIFF,
    "tiff": ImageFormat.TIFF,
}

# Pillow encoder names. EXIF files are JPEG streams carrying an EXIF block;
# WMF and EMF share Pillow's WMF plugin.
PIL_SAVE_FORMATS: Dict[ImageFormat, str] = {
    ImageFormat.BMP: "BMP",
    ImageFormat.GIF: "GIF",
    ImageFormat.ICON: "ICO",
    ImageFormat.WMF: "WMF",
    ImageFormat.PNG: "PNG",
    ImageFormat.EXIF: "JPEG",
    ImageFormat.EMF: "WMF",
    ImageFormat.JPEG: "JPEG",
    ImageFormat.TIFF: "TIFF",
}

# Encoders that cannot store an alpha channel
_NO_ALPHA_ENCODERS = {"JPEG"}


def get_extension(file_name: Optional[str], to_upper: bool = False) -> str:
    """
    Extension of a file name, without the leading period.

    Args:
        file_name: File name or path; None defaults to "png" since png keeps opacity
        to_upper: Upper case instead of lower case

    Returns:
        Extension such as "jpg" (empty string when the name has none)
    """
    if file_name is None:
        return DEFAULT_EXTENSION.upper() if to_upper else DEFAULT_EXTENSION

    extension = Path(str(file_name)).suffix.lstrip(".")
    return extension.upper() if to_upper else extension.lower()


def is_jpg(file_name: Optional[str]) -> bool:
    return get_extension(file_name) == "jpg"


def get_image_format(file_name: Optional[str]) -> ImageFormat:
    """
    ImageFormat for a file name, case-insensitive.

    A missing file name or extension means PNG.

    Raises:
        UnsupportedFormatError: If the extension has no known format
    """
    extension = get_extension(file_name)
    if not extension:
        return ImageFormat.PNG

    try:
        return EXTENSION_FORMATS[extension]
    except KeyError:
        raise UnsupportedFormatError(
            f"Unsupported image extension '.{extension}' for file name: {file_name}"
        ) from None


def image_format_name(image_format: ImageFormat) -> str:
    return image_format.value


def encode_image(image: Any, image_format: ImageFormat) -> bytes:
    """
    Encode an image to bytes in the given format.

    Args:
        image: PIL Image to encode
        image_format: Target ImageFormat

    Returns:
        Encoded file contents

    Raises:
        TypeError: If image is not a PIL Image
        EncodeFailureError: If the encoder fails (the original error is chained)
    """
    if not hasattr(image, "save") or not hasattr(image, "mode"):
        raise TypeError(f"Expected PIL Image, got {type(image)}")

    pil_format = PIL_SAVE_FORMATS[image_format]
    kwargs: Dict[str, Any] = {"format": pil_format}

    if image_format is ImageFormat.JPEG:
        kwargs["quality"] = JPEG_QUALITY
    if image_format is ImageFormat.EXIF:
        exif = image.getexif()
        if len(exif):
            kwargs["exif"] = exif.tobytes()

    if pil_format in _NO_ALPHA_ENCODERS and image.mode not in ("RGB", "L"):
        image = image.convert("RGB")

    buffer = BytesIO()
    try:
        image.save(buffer, **kwargs)
    except Exception as e:
        raise EncodeFailureError(
            f"Failed to save image to {image_format_name(image_format)} format. Error: {e}"
        ) from e

    return buffer.getvalue()


def save_image(image: Any, file_name: str) -> Path:
    """
    Encode an image in the format its file name asks for and write it.

    Returns:
        Path that was written

    Raises:
        UnsupportedFormatError: If the extension has no known format
        EncodeFailureError: If encoding or writing fails
    """
    image_format = get_image_format(file_name)
    data = encode_image(image, image_format)

    output_file = Path(file_name)
    try:
        output_file.write_bytes(data)
    except OSError as e:
        raise EncodeFailureError(f"Failed to write image to {output_file}: {e}") from e

    logger.info(f"Image file saved to {output_file}")
    return output_file


def replace_extension(file_name: str, new_extension: str) -> str:
    """File name (without directory) with its extension swapped; new_extension includes the period."""
    return Path(file_name).stem + new_extension
