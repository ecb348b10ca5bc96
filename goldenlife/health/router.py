"""Health domain router.

Health check endpoint for monitoring and load balancers.
"""

from fastapi import APIRouter

from goldenlife.core.constants import Routes
from goldenlife.core.deps import SettingsDep

router = APIRouter(prefix=Routes.HEALTH.prefix, tags=[Routes.HEALTH.tag])


@router.get("")
async def health(settings: SettingsDep):
    """Liveness plus whether image generation can be served."""
    return {
        "status": "ok",
        "image_generation": (
            "configured" if settings.image_generation_configured else "not_configured"
        ),
    }
