"""Shared data models for the image optimizer."""

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PipelineStage(str, Enum):
    """States of a single optimize-and-upload run."""

    ACQUIRING = "acquiring"
    TRANSCODING = "transcoding"
    UPLOADING = "uploading"
    DONE = "done"
    FAILED = "failed"


class LocalImageSource(BaseModel):
    """Image read from the local filesystem."""

    model_config = ConfigDict(frozen=True)

    type: Literal["local"] = "local"
    file_path: str


class RemoteImageSource(BaseModel):
    """Image fetched over HTTP."""

    model_config = ConfigDict(frozen=True)

    type: Literal["remote"] = "remote"
    file_url: str


ImageSource = Annotated[
    Union[LocalImageSource, RemoteImageSource], Field(discriminator="type")
]


class UploadDestination(BaseModel):
    """Where the optimized image is written."""

    model_config = ConfigDict(frozen=True)

    bucket_name: str = Field(min_length=1)
    object_folder: str = ""
    object_slug: str = Field(min_length=1)

    @field_validator("object_folder")
    @classmethod
    def _reject_parent_segments(cls, value: str) -> str:
        if ".." in value.split("/"):
            raise ValueError("object_folder must not contain '..' segments")
        return value

    @field_validator("object_slug")
    @classmethod
    def _reject_path_separators(cls, value: str) -> str:
        if "/" in value or value in (".", ".."):
            raise ValueError("object_slug must be a single path segment")
        return value


class OptimizeImageRequest(BaseModel):
    """Payload of one optimize-and-upload invocation."""

    model_config = ConfigDict(frozen=True)

    source: ImageSource
    dest: UploadDestination


class OptimizeImageResult(BaseModel):
    """Public location of the uploaded image."""

    optimized_img_url: str
