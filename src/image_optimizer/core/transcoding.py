"""Convert raw image bytes into web-optimized AVIF."""

import io

from PIL import Image, UnidentifiedImageError, features

from .exceptions import ConfigurationError, TranscodingError

DEFAULT_QUALITY = 85


def normalize_mode(image: Image.Image) -> Image.Image:
    """Convert an image to RGB or RGBA, keeping transparency when present."""
    if image.mode in ("RGB", "RGBA"):
        return image

    has_alpha = "A" in image.getbands() or "transparency" in image.info
    return image.convert("RGBA" if has_alpha else "RGB")


class AvifTranscoder:
    """Pure transcoding service with no I/O dependencies."""

    format_name = "AVIF"

    def __init__(self, quality: int = DEFAULT_QUALITY):
        if not 0 <= quality <= 100:
            raise ValueError(f"quality must be between 0 and 100, got {quality}")
        self.quality = quality

    def transcode(self, image_bytes: bytes) -> bytes:
        """
        Decode ``image_bytes`` and re-encode them as AVIF.

        Raises:
            TranscodingError: The input is not a decodable image
            ConfigurationError: Pillow was built without the AVIF codec
        """
        if not features.check("avif"):
            raise ConfigurationError("Pillow was built without AVIF support")

        try:
            image = Image.open(io.BytesIO(image_bytes))
            image.load()
        except (
            UnidentifiedImageError,
            Image.DecompressionBombError,
            OSError,
            SyntaxError,
            ValueError,
        ) as e:
            # SyntaxError/ValueError surface from some malformed headers
            raise TranscodingError(f"Cannot decode source image: {e}") from e

        output = io.BytesIO()
        try:
            normalize_mode(image).save(
                output, format=self.format_name, quality=self.quality
            )
        except (OSError, ValueError) as e:
            raise TranscodingError(f"Cannot encode image as AVIF: {e}") from e
        return output.getvalue()
