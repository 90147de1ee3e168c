"""Health endpoint.

Exposes:
- GET /api/health: liveness plus the resolved docs/config paths
"""

from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends

from ..core.config import Settings
from ..core.models_io import HealthPaths, HealthResponse
from ..deps import get_settings

router = APIRouter(tags=["health"])


def rfc3339(moment: Optional[datetime] = None) -> str:
    """Local time to the second, with `Z` instead of `+00:00` for UTC."""
    if moment is None:
        moment = datetime.now().astimezone()
    stamp = moment.isoformat(timespec="seconds")
    if stamp.endswith("+00:00"):
        stamp = stamp[:-6] + "Z"
    return stamp


@router.get("/api/health", response_model=HealthResponse)
def health(settings: Settings = Depends(get_settings)):
    """Report that the process is up and which roots it is serving."""
    return HealthResponse(
        status="healthy",
        time=rfc3339(),
        config=HealthPaths(docs_path=settings.docs_path, config_path=settings.config_path),
    )
