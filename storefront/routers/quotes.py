from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException

from storefront.dependencies.services import get_quote_service
from storefront.routers.errors import server_failure
from storefront.schemas.catalog import ErrorResponse
from storefront.schemas.quote import QuoteListResponse, QuoteRecord
from storefront.services import QuoteService
from storefront.services.exceptions import NotFoundError, StorageError, ValidationError

router = APIRouter()


@router.get("/quotes", response_model=QuoteListResponse)
async def list_quotes(service: QuoteService = Depends(get_quote_service)):
    try:
        return QuoteListResponse(quotes=await service.list())
    except StorageError as exc:
        raise server_failure(exc) from exc


@router.get(
    "/quotes/{quote_id}",
    response_model=QuoteRecord,
    responses={404: {"model": ErrorResponse}},
)
async def get_quote(
    quote_id: str,
    service: QuoteService = Depends(get_quote_service),
):
    try:
        return await service.get_by_id(quote_id)
    except NotFoundError as exc:
        raise HTTPException(status_code=404, detail=exc.message) from exc
    except StorageError as exc:
        raise server_failure(exc) from exc


@router.post(
    "/quotes",
    response_model=QuoteRecord,
    status_code=201,
    responses={400: {"model": ErrorResponse}},
)
async def create_quote(
    payload: Any = Body(default=None),
    service: QuoteService = Depends(get_quote_service),
):
    try:
        return await service.append(payload)
    except ValidationError as exc:
        raise HTTPException(status_code=400, detail=exc.message) from exc
    except StorageError as exc:
        raise server_failure(exc) from exc
