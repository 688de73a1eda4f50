"""Unit tests for AvifTranscoder."""

import io
from unittest.mock import patch

import pytest
from PIL import Image, features

from image_optimizer.core.exceptions import ConfigurationError, TranscodingError
from image_optimizer.core.transcoding import AvifTranscoder, normalize_mode
from image_optimizer.testing.fakes import create_test_image

requires_avif = pytest.mark.skipif(
    not features.check("avif"), reason="Pillow built without AVIF support"
)


@requires_avif
class TestTranscode:
    """Tests for AVIF encoding."""

    @pytest.mark.parametrize("image_format", ["PNG", "JPEG", "GIF", "BMP"])
    def test_output_is_decodable_avif(self, image_format):
        """Test common source formats become AVIF of the same size."""
        source = create_test_image(64, 48, image_format=image_format)

        output = AvifTranscoder().transcode(source)

        with Image.open(io.BytesIO(output)) as image:
            assert image.format == "AVIF"
            assert image.size == (64, 48)

    def test_transparency_is_kept(self):
        """Test RGBA sources keep an alpha channel."""
        source = create_test_image(32, 32, mode="RGBA")

        output = AvifTranscoder().transcode(source)

        with Image.open(io.BytesIO(output)) as image:
            assert "A" in image.getbands()

    def test_quality_is_passed_to_encoder(self):
        """Test the configured quality reaches Image.save."""
        source = create_test_image(32, 32)
        original_save = Image.Image.save
        calls = []

        def spy_save(self, fp, format=None, **params):
            calls.append((format, params))
            return original_save(self, fp, format=format, **params)

        with patch.object(Image.Image, "save", spy_save):
            AvifTranscoder(quality=60).transcode(source)

        assert calls == [("AVIF", {"quality": 60})]

    def test_default_quality_is_85(self):
        """Test the default quality setting."""
        assert AvifTranscoder().quality == 85

    def test_lower_quality_is_not_larger(self):
        """Test quality actually affects the encoded output."""
        source = create_test_image(200, 200)

        high = AvifTranscoder(quality=95).transcode(source)
        low = AvifTranscoder(quality=20).transcode(source)

        assert len(low) <= len(high)

    @pytest.mark.parametrize(
        "payload",
        [b"", b"definitely not an image", b"\x89PNG\r\n\x1a\n" + b"\x00" * 16],
    )
    def test_corrupt_input(self, payload):
        """Test undecodable bytes raise TranscodingError."""
        with pytest.raises(TranscodingError):
            AvifTranscoder().transcode(payload)

    def test_truncated_image(self):
        """Test a truncated JPEG raises TranscodingError."""
        source = create_test_image(100, 100, image_format="JPEG")

        with pytest.raises(TranscodingError):
            AvifTranscoder().transcode(source[: len(source) // 2])


class TestTranscoderConfiguration:
    """Tests that do not need the AVIF codec."""

    @pytest.mark.parametrize("quality", [-1, 101])
    def test_invalid_quality(self, quality):
        """Test out-of-range quality is rejected."""
        with pytest.raises(ValueError, match="quality"):
            AvifTranscoder(quality=quality)

    def test_missing_codec_is_configuration_error(self):
        """Test a Pillow build without AVIF fails as configuration."""
        with patch("image_optimizer.core.transcoding.features.check", return_value=False):
            with pytest.raises(ConfigurationError, match="AVIF"):
                AvifTranscoder().transcode(create_test_image(10, 10))


class TestNormalizeMode:
    """Tests for normalize_mode function."""

    @pytest.mark.parametrize("mode", ["RGB", "RGBA"])
    def test_supported_modes_untouched(self, mode):
        """Test RGB and RGBA images are returned as-is."""
        image = Image.new(mode, (4, 4))

        assert normalize_mode(image) is image

    @pytest.mark.parametrize("mode", ["L", "CMYK", "1", "P"])
    def test_opaque_modes_become_rgb(self, mode):
        """Test opaque modes are converted to RGB."""
        assert normalize_mode(Image.new(mode, (4, 4))).mode == "RGB"

    def test_alpha_modes_become_rgba(self):
        """Test greyscale with alpha converts to RGBA."""
        assert normalize_mode(Image.new("LA", (4, 4))).mode == "RGBA"

    def test_palette_transparency_becomes_rgba(self):
        """Test palette images with a transparent index keep transparency."""
        image = Image.new("P", (4, 4))
        image.info["transparency"] = 0

        assert normalize_mode(image).mode == "RGBA"
