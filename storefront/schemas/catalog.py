from typing import List

from pydantic import BaseModel, ConfigDict, Field


class ProductCategory(BaseModel):
    key: str
    name: str
    desc: str


class ProductCatalogResponse(BaseModel):
    categories: List[ProductCategory]


class ShopConfigResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    phone: str
    shop_name: str = Field(alias="shopName")
    tagline: str
    address: str
    hours: str


class HealthResponse(BaseModel):
    ok: bool = True
    service: str


class ErrorResponse(BaseModel):
    error: str
