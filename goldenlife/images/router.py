"""Image domain router.

POST /api/generate-image proxies a prompt to the image provider.
"""

from fastapi import APIRouter

from goldenlife.core.constants import CommonResponses, Routes
from goldenlife.core.deps import ImageServiceDep
from goldenlife.core.exceptions import BadRequestError
from goldenlife.images.schemas import ImageGenerationRequest, ImageGenerationResponse

router = APIRouter(
    prefix=Routes.IMAGES.prefix,
    tags=[Routes.IMAGES.tag],
    responses={
        **CommonResponses.BAD_REQUEST,
        **CommonResponses.BAD_GATEWAY,
        **CommonResponses.SERVICE_UNAVAILABLE,
    },
)


@router.post("/generate-image", response_model=ImageGenerationResponse)
async def generate_image(body: ImageGenerationRequest, images: ImageServiceDep):
    """Generate a single image from a text prompt."""
    # An unconfigured integration answers 503 before the input is looked at.
    images.ensure_configured()

    if not body.prompt or not body.prompt.strip():
        raise BadRequestError("Prompt is required")

    image = await images.generate(body.prompt, body.size)
    return ImageGenerationResponse(url=image.url, b64_json=image.b64_json)
