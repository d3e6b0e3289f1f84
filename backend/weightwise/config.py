from pydantic_settings import BaseSettings
from functools import lru_cache

from weightwise.utils.enums import Period


class Settings(BaseSettings):
    # Database
    DATABASE_URL: str = "sqlite+aiosqlite:///./weightwise.db"

    # Analytics
    DEFAULT_PERIOD: Period = Period.month
    CHART_PADDING_LBS: float = 10.0  # Space above/below the plotted weights

    # App Settings
    DEBUG: bool = False
    APP_NAME: str = "WeightWise"
    API_V1_PREFIX: str = "/api"

    class Config:
        env_file = ".env"
        case_sensitive = True


@lru_cache()
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
