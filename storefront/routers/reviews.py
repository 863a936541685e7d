from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException

from storefront.dependencies.services import get_review_service
from storefront.routers.errors import server_failure
from storefront.schemas.catalog import ErrorResponse
from storefront.schemas.review import ReviewListResponse, ReviewRecord
from storefront.services import ReviewService
from storefront.services.exceptions import StorageError, ValidationError

router = APIRouter()


@router.get("/reviews", response_model=ReviewListResponse)
async def list_reviews(service: ReviewService = Depends(get_review_service)):
    try:
        return ReviewListResponse(reviews=await service.list())
    except StorageError as exc:
        raise server_failure(exc) from exc


@router.post(
    "/reviews",
    response_model=ReviewRecord,
    status_code=201,
    responses={400: {"model": ErrorResponse}},
)
async def create_review(
    payload: Any = Body(default=None),
    service: ReviewService = Depends(get_review_service),
):
    try:
        return await service.append(payload)
    except ValidationError as exc:
        raise HTTPException(status_code=400, detail=exc.message) from exc
    except StorageError as exc:
        raise server_failure(exc) from exc
