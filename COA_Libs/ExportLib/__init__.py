"""
ExportLib - File naming and image encoding
"""

from COA_Libs.ExportLib.image_export import (
    ImageFormat,
    get_extension,
    get_image_format,
    image_format_name,
    encode_image,
    save_image,
    replace_extension,
    is_jpg,
)

__all__ = [
    "ImageFormat",
    "get_extension",
    "get_image_format",
    "image_format_name",
    "encode_image",
    "save_image",
    "replace_extension",
    "is_jpg",
]
