"""Logging setup and structured logging for itinerary generation."""

import logging
from typing import Any

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Install a single stream handler on the root logger.

    Safe to call more than once (Streamlit reruns the script on every
    interaction).
    """
    root = logging.getLogger()
    root.setLevel(level.upper())
    if not any(getattr(h, "_travel_planner", False) for h in root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._travel_planner = True  # type: ignore[attr-defined]
        root.addHandler(handler)


class StructuredGenerationLogger:
    """Structured logger for itinerary generation attempts."""

    def log_attempt(
        self,
        source: str,
        destination: str,
        outcome: str,
        latency_ms: float,
        error_kind: str | None = None,
        error_detail: str | None = None,
    ) -> None:
        """Log one generation attempt with structured data."""
        log_data: dict[str, Any] = {
            "source": source,
            "destination": destination,
            "outcome": outcome,
            "latency_ms": round(latency_ms, 2),
        }

        if error_kind:
            log_data["error_kind"] = error_kind
        if error_detail:
            log_data["error_detail"] = error_detail

        log_msg = f"Itinerary generation: {source} - {outcome}"

        if outcome == "success":
            logger.info(log_msg, extra={"structured": log_data})
        else:
            logger.error(log_msg, extra={"structured": log_data})


generation_logger = StructuredGenerationLogger()
