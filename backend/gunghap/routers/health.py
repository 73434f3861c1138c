from datetime import datetime, timezone

from fastapi import APIRouter, Request

from .. import __version__
from ..config import settings
from ..limiter import limiter

router = APIRouter(tags=["health"])


@router.get("/health")
@limiter.limit(settings.health_rate_limit)
def health(request: Request):
    return {
        "ok": True,
        "service": settings.app_name,
        "version": __version__,
        "env": settings.app_env,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
