"""Gateway error taxonomy for itinerary generation."""

from enum import Enum

FALLBACK_ERROR_MESSAGE = (
    "Failed to create the itinerary. "
    "Please check your internet connection or API key, then try again."
)


class GatewayErrorKind(str, Enum):
    """Why an itinerary generation call failed."""

    NETWORK = "network"
    PROVIDER = "provider"
    EMPTY_RESPONSE = "empty_response"
    INVALID_JSON = "invalid_json"
    SCHEMA_VIOLATION = "schema_violation"


class GatewayError(Exception):
    """Itinerary generation failed.

    The detail is for logs only; users see FALLBACK_ERROR_MESSAGE.
    """

    def __init__(self, kind: GatewayErrorKind, detail: str = ""):
        self.kind = kind
        self.detail = detail
        super().__init__(f"{kind.value}: {detail}" if detail else kind.value)
