from fastapi import APIRouter, Depends

from storefront.config import Settings, get_settings
from storefront.schemas.catalog import HealthResponse

router = APIRouter()


@router.get("/api/health", response_model=HealthResponse)
def health(settings: Settings = Depends(get_settings)):
    return HealthResponse(ok=True, service=settings.app_name)
