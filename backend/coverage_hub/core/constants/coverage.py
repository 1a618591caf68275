"""
Coverage formula constants — multipliers, thresholds, rounding unit.

Every number the estimator uses lives here. When underwriting changes the
formula, update ONE file.
"""

# Base coverage = annual income * INCOME_MULTIPLE
INCOME_MULTIPLE: int = 12

# Age brackets, checked from the top down (strictly greater than)
SENIOR_AGE_THRESHOLD: int = 45
SENIOR_AGE_MULTIPLIER: float = 1.2
MIDDLE_AGE_THRESHOLD: int = 35
MIDDLE_AGE_MULTIPLIER: float = 1.1

# Each dependent adds annual income * DEPENDENT_INCOME_MULTIPLE
DEPENDENT_INCOME_MULTIPLE: int = 2

# Extreme weather (Celsius, exclusive bounds)
EXTREME_HEAT_CELSIUS: float = 40
EXTREME_COLD_CELSIUS: float = 5
EXTREME_WEATHER_MULTIPLIER: float = 1.05

# Bull market (BTC/USD, exclusive bound)
BULL_MARKET_BTC_USD: float = 50000
BULL_MARKET_MULTIPLIER: float = 1.02

# One lakh — coverage is always a multiple of this
LAKH: int = 100_000

# Monthly premium = coverage * PREMIUM_RATE
PREMIUM_RATE: float = 0.009

CURRENCY_SYMBOL: str = "₹"
