"""
Health schemas — liveness probe response.
"""
from pydantic import BaseModel, Field


class EnvironmentCheck(BaseModel):
    """Which secrets are configured. Never carries their values."""
    has_weather_key: bool = Field(serialization_alias="hasWeatherKey")
    has_database_url: bool = Field(serialization_alias="hasDatabaseUrl")


class HealthResponse(BaseModel):
    status: str = "OK"
    timestamp: str
    database: str
    environment: EnvironmentCheck
