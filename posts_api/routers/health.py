"""Health check endpoint.

Returns service status including connectivity to the posts table.
"""

import logging
from typing import Any

from fastapi import APIRouter
from starlette.responses import JSONResponse

from posts_api.core.config import settings
from posts_api.db.supabase import get_supabase

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health")
async def health_check() -> Any:
    """Return 200 when the posts table answers a one-row read, 503 otherwise."""
    db_status = "disconnected"

    try:
        client = get_supabase()
        result = client.table(settings.POSTS_TABLE).select("id").limit(1).execute()
        if result is not None:
            db_status = "connected"
    except Exception:
        logger.warning("Health check: Supabase connection failed", exc_info=True)

    payload: dict[str, str] = {
        "status": "ok" if db_status == "connected" else "degraded",
        "database": db_status,
        "table": settings.POSTS_TABLE,
    }

    if db_status != "connected":
        return JSONResponse(status_code=503, content=payload)

    return payload
