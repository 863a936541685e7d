from __future__ import annotations

from typing import List

from storefront.config import Settings
from storefront.schemas.catalog import (
    ProductCatalogResponse,
    ProductCategory,
    ShopConfigResponse,
)

PRODUCT_CATEGORIES: List[ProductCategory] = [
    ProductCategory(key="tmt", name="Rod / TMT", desc="Daily rate updates, wholesale bundles"),
    ProductCategory(key="cement", name="Cement", desc="Birla, Dalmia, UltraTech, and more"),
    ProductCategory(key="bricks", name="Bricks", desc="First-class, picked and stacked"),
    ProductCategory(key="sand", name="Sand & Stone", desc="Clean river sand, chips"),
    ProductCategory(key="paint", name="Paint", desc="Berger shades, putty, primer"),
    ProductCategory(key="electrical", name="Electrical", desc="Cables, switches, lighting"),
    ProductCategory(key="plumbing", name="Water Line", desc="Pipes, fittings, tanks"),
]


class CatalogService:
    """Read-only shop data that comes from code and configuration, not storage."""

    def __init__(self, settings: Settings) -> None:
        self._settings = settings

    async def products(self) -> ProductCatalogResponse:
        return ProductCatalogResponse(
            categories=[category.model_copy() for category in PRODUCT_CATEGORIES]
        )

    async def shop_config(self) -> ShopConfigResponse:
        return ShopConfigResponse(
            phone=self._settings.shop_phone,
            shop_name=self._settings.shop_name,
            tagline=self._settings.shop_tagline,
            address=self._settings.shop_address,
            hours=self._settings.shop_hours,
        )
