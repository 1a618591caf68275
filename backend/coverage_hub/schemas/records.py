"""
Record schemas — persisted coverage requests and API call log entries, plus
the monitoring responses built from them.
"""
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class CoverageRequestRecord(BaseModel):
    """A row from the coverage_requests table."""
    model_config = ConfigDict(extra="ignore")

    id: Optional[Union[int, str]] = None
    name: str
    age: int
    city: str
    annual_income: float = Field(serialization_alias="annualIncome")
    dependents: int
    recommended_coverage: float = Field(serialization_alias="recommendedCoverage")
    monthly_premium: float = Field(serialization_alias="monthlyPremium")
    weather_data: Optional[Dict[str, Any]] = Field(default=None, serialization_alias="weatherData")
    crypto_data: Optional[Dict[str, Any]] = Field(default=None, serialization_alias="cryptoData")
    created_at: Optional[str] = Field(default=None, serialization_alias="timestamp")


class ApiCallRecord(BaseModel):
    """A row from the api_responses table."""
    model_config = ConfigDict(extra="ignore")

    id: Optional[Union[int, str]] = None
    api_type: str = Field(serialization_alias="apiType")
    endpoint: str
    request: Optional[Dict[str, Any]] = None
    response: Optional[Dict[str, Any]] = None
    correlation_id: Optional[str] = Field(default=None, serialization_alias="userId")
    created_at: Optional[str] = Field(default=None, serialization_alias="timestamp")


class CoverageRequestListResponse(BaseModel):
    success: bool = True
    data: List[CoverageRequestRecord]
    count: int


class ApiCallListResponse(BaseModel):
    success: bool = True
    data: List[ApiCallRecord]
    count: int


class DatabaseStats(BaseModel):
    state: str
    coverage_requests: int = Field(serialization_alias="coverageRequests")
    api_responses: int = Field(serialization_alias="apiResponses")


class StoreInfo(BaseModel):
    url: Optional[str] = None
    connected: bool


class DbStats(BaseModel):
    database: DatabaseStats
    store: StoreInfo


class DbStatsResponse(BaseModel):
    success: bool = True
    stats: DbStats
