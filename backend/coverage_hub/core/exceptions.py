"""
Custom exception hierarchy for Coverage Hub.

Exceptions are categorized by who sees them:
- ValidationError: bad form input, surfaced to the caller as HTTP 400
- EnrichmentUnavailable: a third-party lookup failed; recovered inside the
  enrichment clients and never surfaced as a request failure
- PersistenceFailure: a store write/read failed; logged and swallowed on the
  coverage path, surfaced as HTTP 500 only on the monitoring endpoints

Anything outside this hierarchy is an unexpected error (HTTP 500).
"""


class CoverageHubException(Exception):
    """Base exception for Coverage Hub."""
    pass


class ValidationError(CoverageHubException):
    """
    Invalid or missing form input.

    Raised before any outbound lookup or persistence happens.
    """
    def __init__(self, message: str, field: str = None):
        self.field = field
        super().__init__(message)


class EnrichmentUnavailable(CoverageHubException):
    """
    External lookup (weather, crypto) could not produce a payload.

    Covers network errors, timeouts, non-2xx statuses, undecodable bodies and
    missing credentials.
    """
    def __init__(self, service: str, message: str, status_code: int = None):
        self.service = service
        self.status_code = status_code
        super().__init__(f"{service} lookup unavailable: {message}")


class PersistenceFailure(CoverageHubException):
    """
    Store operation failed.

    Examples: store not configured, API error from the store, connection drop.
    """
    def __init__(self, operation: str, message: str):
        self.operation = operation
        super().__init__(f"{operation} failed: {message}")
