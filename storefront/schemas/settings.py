from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class FaqEntry(BaseModel):
    question: str
    answer: str


class ShopInfo(BaseModel):
    name: str = ""
    address: str = ""
    phone: str = ""
    whatsapp: str = ""
    hours: str = ""


class SettingsDocument(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    faqs: List[FaqEntry] = Field(default_factory=list)
    shop_info: ShopInfo = Field(default_factory=ShopInfo, alias="shopInfo")


class SettingsUpdateResponse(BaseModel):
    ok: bool = True
    settings: Optional[SettingsDocument] = None
