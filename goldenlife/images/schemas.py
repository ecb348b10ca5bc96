"""Image domain schemas."""

from typing import Literal

from pydantic import BaseModel

ImageSize = Literal["1024x1024", "512x512", "256x256"]


class ImageGenerationRequest(BaseModel):
    """Request body for POST /api/generate-image.

    `prompt` is optional at the schema level so a missing prompt gets the
    same 400 as an empty one.
    """

    prompt: str | None = None
    size: ImageSize = "1024x1024"


class ImageGenerationResponse(BaseModel):
    url: str | None = None
    b64_json: str | None = None
