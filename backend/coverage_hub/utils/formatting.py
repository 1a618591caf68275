"""
Formatting helpers — money grouping and credential masking for logs.
"""
import re
from typing import Optional

_CREDENTIALS = re.compile(r"//.*@")


def format_grouped(amount: float) -> str:
    """Format a number with comma thousands separators ("9,600,000")."""
    if float(amount).is_integer():
        return f"{int(amount):,}"
    return f"{amount:,.3f}".rstrip("0").rstrip(".")


def mask_url(url: Optional[str]) -> Optional[str]:
    """Hide user:password in a connection URL."""
    if not url:
        return url
    return _CREDENTIALS.sub("//***:***@", url)
