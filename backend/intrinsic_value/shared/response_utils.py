"""Response code and message lookup for API envelopes."""
import re
from typing import Optional

RESPONSE_CODE_PREFIX = "VALUATION-"

DEFAULT_MESSAGE = "Success"

_RESPONSE_MESSAGES = {
    "10": "Intrinsic value calculated successfully",
}


def response_code(number: str, prefix: str = RESPONSE_CODE_PREFIX) -> str:
    """Build an internal response code such as ``VALUATION-10``."""
    return f"{prefix}{number}"


def get_response_message(code: Optional[str]) -> str:
    """Look up the message for an internal code, falling back to a generic one."""
    if not code:
        return DEFAULT_MESSAGE
    # Codes are <prefix><number>; only the number selects the message
    match = re.search(r"(\d+)$", code)
    if match is None:
        return DEFAULT_MESSAGE
    return _RESPONSE_MESSAGES.get(match.group(1), DEFAULT_MESSAGE)
