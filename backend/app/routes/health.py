"""
Mobile Bazar Backend — Health Check and Banner Routes
=======================================================

What:  GET / (plain-text service banner) and GET /health (database reachability check).
Who:   Browsers and uptime checks hit `/`; load balancers and Docker hit `/health`.

Status levels:
    - healthy:   Database answered the ping (HTTP 200)
    - unhealthy: Database unreachable (HTTP 503, stop routing traffic)
"""

import logging
import time

from fastapi import APIRouter, Response
from fastapi.responses import PlainTextResponse
from pymongo.errors import PyMongoError

from app import __version__
from app.database import ping_database
from app.schemas.common import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

BANNER = 'Mobile bazar "API"   Here'

_start_time = time.time()


@router.get("/", response_class=PlainTextResponse, summary="Service banner")
async def root() -> str:
    return BANNER


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={503: {"description": "Database unreachable", "model": HealthResponse}},
    summary="Service health check",
)
async def health_check(response: Response) -> HealthResponse:
    """
    Ping the database and report aggregate status.

    The ping is the cheapest round trip the server offers; a failure is
    reported in the body and as HTTP 503, never raised.
    """
    db_status = "connected"
    overall = "healthy"

    try:
        await ping_database()
    except PyMongoError as e:
        db_status = "disconnected"
        overall = "unhealthy"
        logger.warning("Health check: database unreachable: %s", str(e))

    if overall == "unhealthy":
        response.status_code = 503

    return HealthResponse(
        status=overall,
        version=__version__,
        database=db_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
