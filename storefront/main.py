from contextlib import asynccontextmanager
import logging

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from storefront.config import Settings, get_settings
from storefront.core.middleware import (
    AccessLogMiddleware,
    BodySizeLimitMiddleware,
    SecurityHeadersMiddleware,
)
from storefront.core.rate_limiter import rate_limit_api
from storefront.dependencies.services import get_record_store_cached

# Import routers directly from submodules
from storefront.health import router as health_router
from storefront.routers.catalog import router as catalog_router
from storefront.routers.pages import router as pages_router
from storefront.routers.quotes import router as quotes_router
from storefront.routers.reviews import router as reviews_router
from storefront.routers.settings import router as settings_router


def configure_logging() -> None:
    """Ensure application logs use the INFO level by default."""
    root_logger = logging.getLogger()
    if not root_logger.handlers:
        logging.basicConfig(
            level=logging.INFO,
            format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        )
    else:
        root_logger.setLevel(logging.INFO)

# Configure logging as soon as the module is loaded
configure_logging()

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manages application startup and shutdown events.
    """
    settings = get_settings()
    logger.info("Application settings on startup: %s", settings.model_dump(mode="json"))

    store = get_record_store_cached()
    logger.info("Storing documents under %s", store.base_dir)
    if not settings.frontend_dir.is_dir():
        logger.warning("Frontend directory %s not found; only the API is served", settings.frontend_dir)
    logger.info("Application startup complete.")

    try:
        yield
    finally:
        logger.info("Application shutdown complete.")


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        {"error": exc.detail},
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


async def body_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("Rejected malformed request body on %s", request.url.path)
    return JSONResponse({"error": "Malformed JSON body"}, status_code=400)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    app = FastAPI(
        title=settings.app_name,
        lifespan=lifespan,
        redirect_slashes=False,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(BodySizeLimitMiddleware, max_bytes=settings.max_body_bytes)
    app.add_middleware(AccessLogMiddleware)

    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, body_error_handler)

    # --- Include Routers ---

    api_dependencies = [Depends(rate_limit_api)]
    app.include_router(health_router, dependencies=api_dependencies)
    app.include_router(settings_router, prefix="/api", dependencies=api_dependencies)
    app.include_router(reviews_router, prefix="/api", dependencies=api_dependencies)
    app.include_router(quotes_router, prefix="/api", dependencies=api_dependencies)
    app.include_router(catalog_router, prefix="/api", dependencies=api_dependencies)
    # Catch-all for the static storefront; must stay last.
    app.include_router(pages_router)
    return app


app = create_app()
