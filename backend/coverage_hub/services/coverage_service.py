"""
Coverage service — validate, enrich, estimate, persist, respond.

The estimate is never blocked by infrastructure: enrichment failures become
"no data" and the coverage request write is fire-and-forget. Only invalid
input stops a request, and it does so before any outbound call.
"""
import logging
import uuid
from dataclasses import dataclass
from typing import Any, Dict, Optional

from coverage_hub.core.exceptions import ValidationError
from coverage_hub.db.coverage_request_store import CoverageRequestStore
from coverage_hub.schemas.coverage import (
    CalculateCoverageRequest,
    CoverageResult,
    MarketInfo,
    WeatherInfo,
)
from coverage_hub.services.coverage_estimator import estimate_coverage
from coverage_hub.services.enrichment_service import EnrichmentService
from coverage_hub.utils.background import spawn
from coverage_hub.utils.type_converters import to_float, to_int

MISSING_FIELDS_MESSAGE = "All fields are required"


@dataclass(frozen=True)
class CoverageInputs:
    """A validated form submission."""
    name: str
    age: int
    city: str
    annual_income: int
    dependents: int


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    if isinstance(value, (int, float)):
        return value == 0
    return False


def validate_form(form: CalculateCoverageRequest) -> CoverageInputs:
    """Check presence first, then parse the numeric fields.

    name, age, city and annual income must be present and non-empty (zero
    counts as missing). dependents must be present but may be 0.
    """
    required = (form.name, form.age, form.city, form.annual_income)
    if any(_is_blank(v) for v in required) or form.dependents is None:
        raise ValidationError(MISSING_FIELDS_MESSAGE)

    parsed = {}
    for field, value in (
        ("age", form.age),
        ("annualIncome", form.annual_income),
        ("dependents", form.dependents),
    ):
        number = to_int(value)
        if number is None:
            raise ValidationError(f"{field} must be a number", field=field)
        parsed[field] = number

    if parsed["age"] <= 0:
        raise ValidationError("age must be greater than 0", field="age")
    if parsed["annualIncome"] <= 0:
        raise ValidationError("annualIncome must be greater than 0", field="annualIncome")
    if parsed["dependents"] < 0:
        raise ValidationError("dependents cannot be negative", field="dependents")

    return CoverageInputs(
        name=str(form.name).strip(),
        age=parsed["age"],
        city=str(form.city).strip(),
        annual_income=parsed["annualIncome"],
        dependents=parsed["dependents"],
    )


def _text(value: Any) -> Optional[str]:
    """A provider field as display text; non-scalar values are dropped."""
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return None


def _section(payload: Dict[str, Any], key: str) -> Dict[str, Any]:
    value = payload.get(key)
    return value if isinstance(value, dict) else {}


def summarize_weather(payload: Optional[Dict[str, Any]]) -> Optional[WeatherInfo]:
    """Display summary of a weather payload. Unexpected shapes yield empty fields."""
    if payload is None:
        return None
    conditions = payload.get("weather")
    first = conditions[0] if isinstance(conditions, list) and conditions else None
    if not isinstance(first, dict):
        first = {}
    return WeatherInfo(
        temperature=to_float(_section(payload, "main").get("temp")),
        description=_text(first.get("description")),
        city=_text(payload.get("name")),
    )


def summarize_market(payload: Optional[Dict[str, Any]]) -> Optional[MarketInfo]:
    if payload is None:
        return None
    usd = _section(_section(payload, "bpi"), "USD")
    return MarketInfo(
        btc_price=_text(usd.get("rate")),
        last_updated=_text(_section(payload, "time").get("updated")),
    )


class CoverageService:
    def __init__(
        self,
        enrichment: EnrichmentService,
        coverage_store: CoverageRequestStore,
    ) -> None:
        self._enrichment = enrichment
        self._coverage_store = coverage_store
        self._logger = logging.getLogger("coverage_service")

    async def calculate(self, form: CalculateCoverageRequest) -> CoverageResult:
        self._logger.info("new coverage calculation request")
        inputs = validate_form(form)
        self._logger.info("input validation passed city=%s", inputs.city)

        correlation_id = uuid.uuid4().hex
        enrichment = await self._enrichment.enrich(inputs.city, correlation_id=correlation_id)
        weather = enrichment.weather_payload
        crypto = enrichment.crypto_payload

        estimate = estimate_coverage(
            annual_income=inputs.annual_income,
            age=inputs.age,
            dependents=inputs.dependents,
            city=inputs.city,
            weather=weather,
            crypto=crypto,
        )

        spawn(
            self._coverage_store.insert_coverage_request(
                name=inputs.name,
                age=inputs.age,
                city=inputs.city,
                annual_income=inputs.annual_income,
                dependents=inputs.dependents,
                recommended_coverage=estimate.coverage,
                monthly_premium=estimate.monthly_premium,
                weather_data=weather,
                crypto_data=crypto,
            ),
            name=f"save-coverage-request-{correlation_id}",
        )

        return CoverageResult(
            coverage=estimate.coverage,
            monthly_premium=estimate.monthly_premium,
            reasoning=estimate.reasoning,
            weather_info=summarize_weather(weather),
            market_info=summarize_market(crypto),
        )
