import os
from typing import Optional
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import BaseModel


load_dotenv()


class Settings(BaseModel):
    # Supabase (coverage requests + API call log)
    supabase_url: str | None = os.getenv("SUPABASE_URL")
    supabase_service_role_key: str | None = os.getenv("SUPABASE_SERVICE_ROLE_KEY")
    coverage_requests_table: str = os.getenv("COVERAGE_REQUESTS_TABLE", "coverage_requests")
    api_responses_table: str = os.getenv("API_RESPONSES_TABLE", "api_responses")

    # OpenWeatherMap
    openweather_api_key: Optional[str] = os.getenv("OPENWEATHER_API_KEY")
    weather_api_url: str = os.getenv(
        "WEATHER_API_URL",
        "https://api.openweathermap.org/data/2.5/weather",
    )

    # CoinDesk
    crypto_api_url: str = os.getenv(
        "CRYPTO_API_URL",
        "https://api.coindesk.com/v1/bpi/currentprice.json",
    )

    # Server
    port: int = int(os.getenv("PORT", "5000"))
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    @property
    def has_weather_key(self) -> bool:
        return bool(self.openweather_api_key)

    @property
    def has_database_url(self) -> bool:
        return bool(self.supabase_url)


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = Settings()
