from fastapi import APIRouter, Depends

from storefront.dependencies.services import get_catalog_service
from storefront.schemas.catalog import ProductCatalogResponse, ShopConfigResponse
from storefront.services import CatalogService

router = APIRouter()


@router.get("/products", response_model=ProductCatalogResponse)
async def list_products(service: CatalogService = Depends(get_catalog_service)):
    return await service.products()


@router.get("/config", response_model=ShopConfigResponse)
async def shop_config(service: CatalogService = Depends(get_catalog_service)):
    return await service.shop_config()
