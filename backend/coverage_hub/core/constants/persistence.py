"""
Persistence constants — listing limits and connection state names.
"""

COVERAGE_REQUESTS_LIST_LIMIT: int = 50
API_RESPONSES_LIST_LIMIT: int = 100

# Connection states reported by /api/db-stats
STATE_DISCONNECTED: str = "disconnected"
STATE_CONNECTED: str = "connected"
STATE_CONNECTING: str = "connecting"
STATE_UNCONFIGURED: str = "unconfigured"
