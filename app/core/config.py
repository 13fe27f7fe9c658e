from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    database_url: str = Field(..., alias="DATABASE_URL")

    jwt_secret_key: str = Field(..., alias="JWT_SECRET_KEY")
    jwt_algorithm: str = Field("HS256", alias="JWT_ALGORITHM")
    access_token_expire_minutes: int = Field(60, alias="ACCESS_TOKEN_EXPIRE_MINUTES")
    auth_cookie_name: str = Field("token", alias="AUTH_COOKIE_NAME")

    log_level: str = Field("INFO", alias="LOG_LEVEL")

    # Date-only fields are calendar days in this zone (see DESIGN.md).
    school_timezone: str = Field("Asia/Dhaka", alias="SCHOOL_TIMEZONE")

    default_page_size: int = Field(10, alias="DEFAULT_PAGE_SIZE")
    max_page_size: int = Field(100, alias="MAX_PAGE_SIZE")

    sms_api_url: Optional[str] = Field(None, alias="SMS_API_URL")
    sms_api_key: Optional[str] = Field(None, alias="SMS_API_KEY")
    sms_sender_id: Optional[str] = Field(None, alias="SMS_SENDER_ID")
    sms_timeout_seconds: float = Field(10.0, alias="SMS_TIMEOUT_SECONDS")

    sms_price_per_message: float = Field(0.40, alias="SMS_PRICE_PER_MESSAGE")
    sms_online_charge_percent: float = Field(2.5, alias="SMS_ONLINE_CHARGE_PERCENT")
    sms_min_purchase: int = Field(10, alias="SMS_MIN_PURCHASE")
    sms_max_purchase: int = Field(10000, alias="SMS_MAX_PURCHASE")
    sms_currency: str = Field("BDT", alias="SMS_CURRENCY")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


settings = Settings()
