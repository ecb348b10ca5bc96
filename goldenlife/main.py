from contextlib import asynccontextmanager

from fastapi import APIRouter, FastAPI

from goldenlife.core.exception_handlers import register_exception_handlers
from goldenlife.core.http import close_image_client
from goldenlife.core.logging import configure_logging
from goldenlife.core.request_logging import add_request_logging_middleware
from goldenlife.health.router import router as health_router
from goldenlife.images.router import router as images_router

configure_logging()


@asynccontextmanager
async def lifespan(_: FastAPI):
    yield
    await close_image_client()


app = FastAPI(title="Golden Life Image Proxy", version="0.1.0", lifespan=lifespan)

api_router = APIRouter()
api_router.include_router(health_router)
api_router.include_router(images_router)

app.include_router(api_router)

add_request_logging_middleware(app)
register_exception_handlers(app)
