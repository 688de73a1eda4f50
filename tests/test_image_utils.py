"""Tests for object key and URL helpers."""

import re
import uuid

from image_optimizer.core.image_utils import (
    build_cdn_url,
    build_object_key,
    describe_source,
)
from image_optimizer.core.models import LocalImageSource, RemoteImageSource

UUID_PATTERN = r"[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}"


class TestBuildObjectKey:
    """Tests for build_object_key function."""

    def test_key_layout(self):
        """Test the key is folder/slug-<uuid>.avif."""
        key = build_object_key("img", "hero")

        assert re.fullmatch(rf"img/hero-{UUID_PATTERN}\.avif", key)

    def test_keys_are_unique_for_identical_inputs(self):
        """Test that repeated calls never collide."""
        keys = {build_object_key("img", "hero") for _ in range(50)}

        assert len(keys) == 50

    def test_custom_id_factory_and_extension(self):
        """Test injecting the id source and extension."""
        key = build_object_key("img", "hero", extension="webp", id_factory=lambda: "fixed")

        assert key == "img/hero-fixed.webp"

    def test_empty_folder(self):
        """Test an empty folder puts the object at the bucket root."""
        key = build_object_key("", "hero", id_factory=lambda: "id")

        assert key == "hero-id.avif"

    def test_folder_slashes_are_normalized(self):
        """Test leading and trailing slashes do not leak into the key."""
        key = build_object_key("/img/blog/", "hero", id_factory=lambda: "id")

        assert key == "img/blog/hero-id.avif"

    def test_default_id_is_uuid4(self):
        """Test the default suffix parses as a version 4 UUID."""
        key = build_object_key("img", "hero")
        suffix = key[len("img/hero-") : -len(".avif")]

        assert uuid.UUID(suffix).version == 4


class TestBuildCdnUrl:
    """Tests for build_cdn_url function."""

    def test_digitalocean_url(self):
        """Test the CDN URL layout."""
        url = build_cdn_url("assets", "nyc3", "img/hero-1.avif", "digitaloceanspaces.com")

        assert url == "https://assets.nyc3.cdn.digitaloceanspaces.com/img/hero-1.avif"

    def test_region_and_domain_are_parameters(self):
        """Test other regions and domains are honoured."""
        url = build_cdn_url("media", "ams3", "a.avif", "example.net")

        assert url == "https://media.ams3.cdn.example.net/a.avif"


def test_describe_source():
    """Test log descriptions for both source variants."""
    assert describe_source(LocalImageSource(file_path="/tmp/a.png")) == "/tmp/a.png"
    assert (
        describe_source(RemoteImageSource(file_url="https://example.com/a.jpg"))
        == "https://example.com/a.jpg"
    )
