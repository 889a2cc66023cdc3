"""Health check endpoints."""

from typing import Any

from fastapi import APIRouter

from backend.app.config import get_settings

router = APIRouter()


@router.get("/health")
async def health() -> dict[str, str]:
    """Simple health check for Docker/k8s.

    Returns:
        200 OK always (application is running)
    """
    return {"status": "ok"}


@router.get("/healthz")
async def healthz() -> dict[str, Any]:
    """Health check with component details.

    The provider is never called here; only whether a key is configured
    is reported.
    """
    settings = get_settings()
    key = settings.openai_api_key
    if key and key.get_secret_value():
        llm_status = "configured"
    elif settings.use_stub_llm:
        llm_status = "stub"
    else:
        llm_status = "missing"

    return {
        "status": "ok",
        "components": {
            "llm": llm_status,
            "model": settings.openai_model,
        },
    }
