from datetime import datetime, timezone

from fastapi import APIRouter, Response, status
from sqlalchemy import text

from src.shared.config import settings
from src.shared.database import engine
from src.shared.logger import get_logger
from src.shared.redis_client import redis_client

logger = get_logger(__name__)
router = APIRouter(tags=["Health"])


async def _probe_redis() -> bool:
    try:
        await redis_client.ping()
        return True
    except Exception as e:
        logger.error("health_check_failed", dependency="redis", error=str(e))
        return False


async def _probe_postgres() -> bool:
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        return True
    except Exception as e:
        logger.error("health_check_failed", dependency="postgres", error=str(e))
        return False


@router.get("/health")
async def health_check(response: Response):
    """
    Reports whether the workflow store (Postgres) and the execution stream
    (Redis) are reachable. Degraded answers carry a 503.
    """
    probes = {
        "postgres": await _probe_postgres(),
        "redis": await _probe_redis(),
    }
    healthy = all(probes.values())

    if not healthy:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE

    return {
        "status": "healthy" if healthy else "degraded",
        "service": settings.APP_NAME,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "version": settings.APP_VERSION,
        "dependencies": {
            name: "healthy" if ok else "unhealthy" for name, ok in probes.items()
        },
    }
