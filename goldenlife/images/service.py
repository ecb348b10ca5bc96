"""Image generation service.

Stateless pass-through to an OpenAI-compatible images API. The only logic
here is configuration checking and error translation.
"""

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Any

import httpx

from goldenlife.core.exceptions import (
    ExternalServiceError,
    ProviderError,
    ServiceNotConfiguredError,
)
from goldenlife.core.http import get_image_client
from goldenlife.core.retry import with_retry

logger = logging.getLogger(__name__)

IMAGE_MODEL = "gpt-image-1"
GENERATIONS_PATH = "images/generations"

NOT_CONFIGURED_MESSAGE = (
    "Image generation is not configured. Please set up the OpenAI integration."
)
GENERATION_FAILED_MESSAGE = "Failed to generate image"


@dataclass(frozen=True)
class GeneratedImage:
    url: str | None = None
    b64_json: str | None = None


class ImageGenerationService:
    def __init__(self, api_key: str | None, base_url: str = "https://api.openai.com/v1"):
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")

    @property
    def is_configured(self) -> bool:
        return bool(self._api_key)

    def ensure_configured(self) -> str:
        """Return the API key, or raise if the integration is not set up."""
        if not self._api_key:
            raise ServiceNotConfiguredError(NOT_CONFIGURED_MESSAGE)
        return self._api_key

    async def generate(self, prompt: str, size: str = "1024x1024") -> GeneratedImage:
        """Generate one image for `prompt`.

        Raises:
            ServiceNotConfiguredError: If no API key is configured
            ExternalServiceError: If the provider is unreachable or refuses
            ProviderError: If the provider's response has no image
        """
        api_key = self.ensure_configured()
        client = get_image_client()
        url = f"{self._base_url}/{GENERATIONS_PATH}"
        payload: dict[str, Any] = {
            "model": IMAGE_MODEL,
            "prompt": prompt,
            "n": 1,
            "size": size,
        }

        async def do_request() -> httpx.Response:
            return await client.post(
                url, json=payload, headers={"Authorization": f"Bearer {api_key}"}
            )

        try:
            # 2 attempts = 1 initial try + 1 retry on network failure
            response = await with_retry(
                do_request,
                attempts=2,
                exceptions=(httpx.RequestError,),
                operation="Image generation request",
            )
        except httpx.RequestError as e:
            logger.error("Image provider unreachable: %s", type(e).__name__)
            raise ExternalServiceError(GENERATION_FAILED_MESSAGE) from e

        if response.status_code != 200:
            logger.error(
                "Image provider returned %s",
                response.status_code,
                extra={"status_code": response.status_code},
            )
            raise ExternalServiceError(GENERATION_FAILED_MESSAGE)

        try:
            items = response.json().get("data") or []
        except (ValueError, AttributeError) as e:
            raise ProviderError("Image provider returned an invalid response") from e

        if not isinstance(items, list) or not items or not isinstance(items[0], dict):
            raise ProviderError("Image provider returned no image")

        first = items[0]
        return GeneratedImage(url=first.get("url"), b64_json=first.get("b64_json"))


@lru_cache
def get_image_generation_service() -> ImageGenerationService:
    """Get cached image service built from settings."""
    from goldenlife.core.settings import get_settings

    settings = get_settings()
    return ImageGenerationService(
        api_key=settings.image_api_key,
        base_url=settings.image_api_base_url,
    )
