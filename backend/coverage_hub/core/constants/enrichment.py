"""
Enrichment constants — lookup kinds and the endpoint identifiers recorded
alongside each API call.
"""

API_TYPE_WEATHER: str = "weather"
API_TYPE_CRYPTO: str = "crypto"

# Recorded endpoint identifiers (no scheme, no credentials)
WEATHER_ENDPOINT_ID: str = "openweathermap.org/data/2.5/weather"
CRYPTO_ENDPOINT_ID: str = "api.coindesk.com/v1/bpi/currentprice.json"

WEATHER_UNITS: str = "metric"
