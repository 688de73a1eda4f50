"""Storage and pipeline configuration loaded from the environment."""

import os
from typing import Optional

from pydantic import BaseModel, Field, ValidationError

from .exceptions import ConfigurationError

DEFAULT_REGION = "nyc3"
SPACES_DOMAIN = "digitaloceanspaces.com"
MIB = 1024 * 1024


class StorageSettings(BaseModel):
    """Object storage connection settings and pipeline tuning knobs.

    Credentials are optional at construction time so that a settings object
    can always be built; they are checked by ``require_credentials`` right
    before the storage client is used.
    """

    access_key: Optional[str] = None
    secret_key: Optional[str] = None
    region: str = DEFAULT_REGION
    endpoint: Optional[str] = None
    cdn_domain: str = SPACES_DOMAIN
    part_size: int = Field(default=5 * MIB, ge=5 * MIB)
    max_concurrency: int = Field(default=4, ge=1)
    fetch_timeout: Optional[float] = Field(default=None, gt=0)
    quality: int = Field(default=85, ge=0, le=100)

    @property
    def endpoint_url(self) -> str:
        """Regional endpoint, derived from the region unless overridden."""
        return self.endpoint or f"https://{self.region}.{SPACES_DOMAIN}"

    def require_credentials(self) -> None:
        """Raise ConfigurationError unless both credentials are set."""
        missing = [
            name
            for name, value in (
                ("access key", self.access_key),
                ("secret key", self.secret_key),
            )
            if not value
        ]
        if missing:
            raise ConfigurationError(
                f"DigitalOcean Spaces credentials are not set: missing {', '.join(missing)}"
            )

    @classmethod
    def from_env(cls) -> "StorageSettings":
        """
        Build settings from environment variables.

        Environment Variables:
            DIGITAL_OCEAN_SPACES_ACCESS_KEY: Access key id
            DIGITAL_OCEAN_SPACES_SECRET_KEY: Secret access key
            DIGITAL_OCEAN_SPACES_REGION: Region slug (defaults to nyc3)
            DIGITAL_OCEAN_SPACES_ENDPOINT: Endpoint URL override
            DIGITAL_OCEAN_SPACES_CDN_DOMAIN: CDN domain used in public URLs
            IMAGE_FETCH_TIMEOUT: Seconds to wait for remote downloads

        Raises:
            ConfigurationError: A variable holds a malformed value
        """
        timeout = os.getenv("IMAGE_FETCH_TIMEOUT") or None
        try:
            return cls(
                access_key=os.getenv("DIGITAL_OCEAN_SPACES_ACCESS_KEY") or None,
                secret_key=os.getenv("DIGITAL_OCEAN_SPACES_SECRET_KEY") or None,
                region=os.getenv("DIGITAL_OCEAN_SPACES_REGION", DEFAULT_REGION),
                endpoint=os.getenv("DIGITAL_OCEAN_SPACES_ENDPOINT") or None,
                cdn_domain=os.getenv("DIGITAL_OCEAN_SPACES_CDN_DOMAIN", SPACES_DOMAIN),
                fetch_timeout=timeout,
            )
        except ValidationError as e:
            raise ConfigurationError(f"Invalid storage settings in environment: {e}") from e
