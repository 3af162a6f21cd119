"""
Tests for file extension handling and image encoding.

Tests cover:
- Extension parsing and normalization
- Extension to format mapping
- Encoder settings per format
- Error wrapping
- Writing files
"""

from io import BytesIO
from unittest.mock import Mock

import pytest
from PIL import Image

from COA_Libs.errors import EncodeFailureError, UnsupportedFormatError
from COA_Libs.ExportLib.image_export import (
    ImageFormat,
    encode_image,
    get_extension,
    get_image_format,
    image_format_name,
    is_jpg,
    replace_extension,
    save_image,
)

TRANSLUCENT_RED = (255, 0, 0, 128)


class TestGetExtension:
    """Tests for get_extension."""

    def test_strips_period_and_lowers(self):
        assert get_extension("arms/photo.JPG") == "jpg"

    def test_upper_case(self):
        assert get_extension("photo.jpeg", to_upper=True) == "JPEG"

    def test_none_defaults_to_png(self):
        assert get_extension(None) == "png"
        assert get_extension(None, to_upper=True) == "PNG"

    def test_no_extension(self):
        assert get_extension("README") == ""

    def test_is_jpg(self):
        assert is_jpg("shield.JPG")
        assert not is_jpg("shield.jpeg")
        assert not is_jpg(None)


class TestGetImageFormat:
    """Tests for get_image_format."""

    @pytest.mark.parametrize(
        "file_name, expected",
        [
            ("a.bmp", ImageFormat.BMP),
            ("a.gif", ImageFormat.GIF),
            ("a.ico", ImageFormat.ICON),
            ("a.wmf", ImageFormat.WMF),
            ("a.png", ImageFormat.PNG),
            ("a.exif", ImageFormat.EXIF),
            ("a.emf", ImageFormat.EMF),
            ("a.jpg", ImageFormat.JPEG),
            ("a.jpeg", ImageFormat.JPEG),
            ("a.tif", ImageFormat.TIFF),
            ("a.tiff", ImageFormat.TIFF),
        ],
    )
    def test_extension_table(self, file_name, expected):
        assert get_image_format(file_name) is expected

    def test_case_insensitive(self):
        assert get_image_format("photo.JPG") is ImageFormat.JPEG
        assert get_image_format("photo.jpg") is ImageFormat.JPEG

    def test_unknown_extension_raises(self):
        with pytest.raises(UnsupportedFormatError):
            get_image_format("archive.xyz")

    def test_unsupported_format_is_value_error(self):
        with pytest.raises(ValueError):
            get_image_format("archive.zip")

    def test_missing_name_or_extension_means_png(self):
        assert get_image_format(None) is ImageFormat.PNG
        assert get_image_format("emblem") is ImageFormat.PNG

    def test_format_names(self):
        assert image_format_name(ImageFormat.JPEG) == "Jpeg"
        assert image_format_name(ImageFormat.ICON) == "Icon"
        assert image_format_name(ImageFormat.TIFF) == "Tiff"


class TestEncodeImage:
    """Tests for encode_image."""

    def test_jpeg_uses_quality_75(self):
        mock_image = Mock()
        mock_image.mode = "RGB"

        encode_image(mock_image, ImageFormat.JPEG)

        _, kwargs = mock_image.save.call_args
        assert kwargs["format"] == "JPEG"
        assert kwargs["quality"] == 75

    def test_other_formats_use_defaults(self):
        mock_image = Mock()
        mock_image.mode = "RGBA"

        encode_image(mock_image, ImageFormat.PNG)

        _, kwargs = mock_image.save.call_args
        assert kwargs == {"format": "PNG"}

    def test_png_keeps_alpha(self):
        image = Image.new("RGBA", (4, 4), TRANSLUCENT_RED)

        decoded = Image.open(BytesIO(encode_image(image, ImageFormat.PNG)))

        assert decoded.mode == "RGBA"
        assert decoded.getpixel((0, 0)) == TRANSLUCENT_RED

    def test_rgba_jpeg_is_flattened(self):
        image = Image.new("RGBA", (8, 8), TRANSLUCENT_RED)

        data = encode_image(image, ImageFormat.JPEG)

        assert data[:2] == b"\xff\xd8"
        assert Image.open(BytesIO(data)).mode == "RGB"

    @pytest.mark.parametrize(
        "image_format, pil_name",
        [
            (ImageFormat.BMP, "BMP"),
            (ImageFormat.GIF, "GIF"),
            (ImageFormat.ICON, "ICO"),
            (ImageFormat.TIFF, "TIFF"),
            (ImageFormat.EXIF, "JPEG"),
        ],
    )
    def test_encodes_with_matching_encoder(self, image_format, pil_name):
        image = Image.new("RGBA", (16, 16), (0, 0, 255, 255))

        data = encode_image(image, image_format)

        assert Image.open(BytesIO(data)).format == pil_name

    def test_encoder_error_is_wrapped(self):
        mock_image = Mock()
        mock_image.mode = "RGBA"
        mock_image.save.side_effect = OSError("disk full")

        with pytest.raises(EncodeFailureError) as excinfo:
            encode_image(mock_image, ImageFormat.PNG)

        assert isinstance(excinfo.value.__cause__, OSError)
        assert "PNG" in str(excinfo.value)

    def test_wmf_without_handler_fails_cleanly(self):
        with pytest.raises(EncodeFailureError):
            encode_image(Image.new("RGBA", (4, 4)), ImageFormat.WMF)

    def test_rejects_non_images(self):
        with pytest.raises(TypeError):
            encode_image("not an image", ImageFormat.PNG)


class TestSaveImage:
    """Tests for save_image and replace_extension."""

    def test_writes_file_in_requested_format(self, tmp_path):
        output = tmp_path / "arms.jpg"

        written = save_image(Image.new("RGBA", (8, 8), TRANSLUCENT_RED), str(output))

        assert written == output
        assert Image.open(output).format == "JPEG"

    def test_unknown_extension_writes_nothing(self, tmp_path):
        output = tmp_path / "arms.xyz"

        with pytest.raises(UnsupportedFormatError):
            save_image(Image.new("RGBA", (8, 8)), str(output))

        assert not output.exists()

    def test_write_failure_is_wrapped(self, tmp_path):
        output = tmp_path / "missing" / "arms.png"

        with pytest.raises(EncodeFailureError) as excinfo:
            save_image(Image.new("RGBA", (8, 8)), str(output))

        assert isinstance(excinfo.value.__cause__, OSError)

    def test_replace_extension(self):
        assert replace_extension("dir/photo.jpg", ".png") == "photo.png"
