"""Convert images to AVIF and publish them to DigitalOcean Spaces."""

__version__ = "0.1.0"
