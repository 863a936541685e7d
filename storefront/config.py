from functools import lru_cache
from pathlib import Path
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

PROJECT_ROOT = Path(__file__).resolve().parents[1]


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    app_name: str = Field(default="Mahamaya Enterprise API")
    data_dir: Path = Field(default=PROJECT_ROOT / "data")
    frontend_dir: Path = Field(default=PROJECT_ROOT / "frontend")
    cors_origins: str = Field(default="*")
    port: int = Field(default=3000)

    review_cap: int = Field(default=100, ge=1)
    quote_cap: int = Field(default=1000, ge=1)

    rate_limit_requests: int = Field(default=200, ge=1)
    rate_limit_window_seconds: int = Field(default=60, ge=1)
    trust_proxy: bool = Field(default=False)
    max_body_bytes: int = Field(default=512 * 1024, ge=1)

    shop_phone: str = Field(default="+919434661990")
    shop_name: str = Field(default="Mahamaya Enterprise")
    shop_tagline: str = Field(default="Hardware · Paint · Electrical")
    shop_address: str = Field(
        default="Vill + PO - Eraur, P.S - Bhatar, District - Purba Bardhaman, PIN - 713121"
    )
    shop_hours: str = Field(
        default="Morning: 7:00 AM – 1:00 PM, Evening: 4:00 PM – 8:30 PM"
    )

    model_config = SettingsConfigDict(
        env_prefix="STOREFRONT_", case_sensitive=False, env_file=".env", extra="ignore"
    )

    @property
    def cors_origin_list(self) -> List[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached application settings."""

    return Settings()
