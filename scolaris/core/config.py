from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    store_backend: str = Field("json", alias="STORE_BACKEND")
    document_path: str = Field("data/scolaris.json", alias="DOCUMENT_PATH")
    database_url: Optional[str] = Field("sqlite:///data/scolaris.db", alias="DATABASE_URL")
    document_key: str = Field("default", alias="DOCUMENT_KEY")

    tuition_fee_amount: int = Field(15000, alias="TUITION_FEE_AMOUNT")

    rank_suffix_first: str = Field("er", alias="RANK_SUFFIX_FIRST")
    rank_suffix_other: str = Field("ème", alias="RANK_SUFFIX_OTHER")

    log_level: str = Field("INFO", alias="LOG_LEVEL")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


settings = Settings()
