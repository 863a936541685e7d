from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException

from storefront.dependencies.services import get_settings_service
from storefront.routers.errors import server_failure
from storefront.schemas.catalog import ErrorResponse
from storefront.schemas.settings import SettingsDocument, SettingsUpdateResponse
from storefront.services import SettingsService
from storefront.services.exceptions import StorageError, ValidationError

router = APIRouter()


@router.get("/settings", response_model=SettingsDocument)
async def read_settings(service: SettingsService = Depends(get_settings_service)):
    try:
        return await service.get()
    except StorageError as exc:
        raise server_failure(exc) from exc


@router.post(
    "/settings",
    response_model=SettingsUpdateResponse,
    responses={400: {"model": ErrorResponse}},
)
async def replace_settings(
    payload: Any = Body(default=None),
    service: SettingsService = Depends(get_settings_service),
):
    try:
        stored = await service.replace(payload)
    except ValidationError as exc:
        raise HTTPException(status_code=400, detail=exc.message) from exc
    except StorageError as exc:
        raise server_failure(exc) from exc
    return SettingsUpdateResponse(ok=True, settings=stored)
