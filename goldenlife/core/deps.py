"""Centralized dependency type aliases for the proxy app's routes.

    from goldenlife.core.deps import ImageServiceDep, SettingsDep
"""

from typing import Annotated

from fastapi import Depends

from goldenlife.core.settings import Settings, get_settings
from goldenlife.images.service import (
    ImageGenerationService,
    get_image_generation_service,
)

# Application settings
SettingsDep = Annotated[Settings, Depends(get_settings)]

# Image generation provider
ImageServiceDep = Annotated[
    ImageGenerationService, Depends(get_image_generation_service)
]
