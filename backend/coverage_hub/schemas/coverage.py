"""
Coverage schemas — form submission and calculation response models.
"""
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class CalculateCoverageRequest(BaseModel):
    """Raw form submission.

    Every field is optional here so that missing fields are reported with the
    form's own 400 message instead of FastAPI's 422. Numbers may arrive as
    strings.
    """
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: Optional[Any] = None
    age: Optional[Any] = None
    city: Optional[Any] = None
    annual_income: Optional[Any] = Field(default=None, alias="annualIncome")
    dependents: Optional[Any] = None


class WeatherInfo(BaseModel):
    temperature: Optional[float] = None
    description: Optional[str] = None
    city: Optional[str] = None


class MarketInfo(BaseModel):
    btc_price: Optional[str] = Field(default=None, serialization_alias="btcPrice")
    last_updated: Optional[str] = Field(default=None, serialization_alias="lastUpdated")


class CoverageResult(BaseModel):
    coverage: int
    monthly_premium: int = Field(serialization_alias="monthlyPremium")
    reasoning: str
    weather_info: Optional[WeatherInfo] = Field(default=None, serialization_alias="weatherInfo")
    market_info: Optional[MarketInfo] = Field(default=None, serialization_alias="marketInfo")


class CalculateCoverageResponse(BaseModel):
    success: bool = True
    data: CoverageResult


class ErrorResponse(BaseModel):
    error: str
    details: Optional[str] = None
