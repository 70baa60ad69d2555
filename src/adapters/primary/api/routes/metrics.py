from prometheus_client import CONTENT_TYPE_LATEST, REGISTRY, generate_latest
from fastapi import APIRouter, Response

router = APIRouter(tags=["Metrics"])

@router.get("/metrics", include_in_schema=False)
async def metrics():
    """
    Validation, mutation and execution-request counters in Prometheus text format.
    """
    return Response(content=generate_latest(REGISTRY), media_type=CONTENT_TYPE_LATEST)
