"""
Coverage estimator — income/age/dependents formula with weather and market
adjustments.

Pure function of its inputs. Each adjustment multiplies the running base, so
the steps must be applied in order:

    1. base = income * 12
    2. age > 45: base *= 1.2, else age > 35: base *= 1.1
    3. base += dependents * income * 2
    4. temperature > 40C or < 5C: base *= 1.05
    5. BTC/USD rate > 50,000: base *= 1.02
    6. coverage = base rounded half-up to the nearest lakh
    7. monthly premium = coverage * 0.009, rounded half-up
"""
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from coverage_hub.core.constants import coverage as c
from coverage_hub.utils.formatting import format_grouped
from coverage_hub.utils.type_converters import parse_grouped_decimal, round_half_up, to_float

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CoverageEstimate:
    coverage: int
    monthly_premium: int
    reasoning: str
    weather_adjusted: bool = False
    market_adjusted: bool = False


def extract_temperature(weather: Optional[Dict[str, Any]]) -> Optional[float]:
    """main.temp from an OpenWeatherMap payload, or None."""
    if not weather:
        return None
    main = weather.get("main")
    if not isinstance(main, dict):
        return None
    return to_float(main.get("temp"))


def extract_btc_usd_rate(crypto: Optional[Dict[str, Any]]) -> Optional[float]:
    """bpi.USD.rate from a CoinDesk payload, parsed from "12,345.6789"."""
    if not crypto:
        return None
    bpi = crypto.get("bpi")
    usd = bpi.get("USD") if isinstance(bpi, dict) else None
    if not isinstance(usd, dict):
        return None
    return parse_grouped_decimal(usd.get("rate"))


def age_multiplier(age: int) -> float:
    if age > c.SENIOR_AGE_THRESHOLD:
        return c.SENIOR_AGE_MULTIPLIER
    if age > c.MIDDLE_AGE_THRESHOLD:
        return c.MIDDLE_AGE_MULTIPLIER
    return 1.0


def is_extreme_weather(temperature: Optional[float]) -> bool:
    if temperature is None:
        return False
    return temperature > c.EXTREME_HEAT_CELSIUS or temperature < c.EXTREME_COLD_CELSIUS


def is_bull_market(btc_usd: Optional[float]) -> bool:
    return btc_usd is not None and btc_usd > c.BULL_MARKET_BTC_USD


def build_reasoning(age: int, annual_income: int, dependents: int, city: str, coverage: int) -> str:
    return (
        f"Based on your profile (Age: {age}, "
        f"Income: {c.CURRENCY_SYMBOL}{format_grouped(annual_income)}, "
        f"Dependents: {dependents}) and current market conditions in {city}, "
        f"we recommend {c.CURRENCY_SYMBOL}{format_grouped(coverage)} coverage."
    )


def estimate_coverage(
    annual_income: int,
    age: int,
    dependents: int,
    city: str = "",
    weather: Optional[Dict[str, Any]] = None,
    crypto: Optional[Dict[str, Any]] = None,
) -> CoverageEstimate:
    """Recommend a coverage amount and monthly premium.

    Args:
        annual_income: yearly income in rupees (> 0)
        age: applicant age in years (> 0)
        dependents: number of dependents (>= 0)
        city: only used in the reasoning text
        weather: raw OpenWeatherMap payload, or None if the lookup failed
        crypto: raw CoinDesk payload, or None if the lookup failed

    Returns:
        CoverageEstimate with coverage always a multiple of one lakh.
    """
    base = annual_income * c.INCOME_MULTIPLE
    base *= age_multiplier(age)
    base += dependents * annual_income * c.DEPENDENT_INCOME_MULTIPLE

    temperature = extract_temperature(weather)
    weather_adjusted = is_extreme_weather(temperature)
    if weather_adjusted:
        base *= c.EXTREME_WEATHER_MULTIPLIER
        logger.info("weather adjustment applied temp=%s", temperature)

    btc_usd = extract_btc_usd_rate(crypto)
    market_adjusted = is_bull_market(btc_usd)
    if market_adjusted:
        base *= c.BULL_MARKET_MULTIPLIER
        logger.info("market adjustment applied btc_usd=%s", btc_usd)

    coverage = round_half_up(base / c.LAKH) * c.LAKH
    monthly_premium = round_half_up(coverage * c.PREMIUM_RATE)
    logger.info("coverage estimate coverage=%s premium=%s", coverage, monthly_premium)

    return CoverageEstimate(
        coverage=coverage,
        monthly_premium=monthly_premium,
        reasoning=build_reasoning(age, annual_income, dependents, city, coverage),
        weather_adjusted=weather_adjusted,
        market_adjusted=market_adjusted,
    )
