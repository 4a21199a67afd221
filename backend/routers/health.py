import time
from fastapi import APIRouter, Request

router = APIRouter()

_start_time = time.time()


@router.get("/health")
async def health_check(request: Request):
    catalog = request.app.state.catalog
    return {
        "status": "ok",
        "uptime_seconds": round(time.time() - _start_time),
        "version": "0.1.0",
        "catalog": catalog.state.value,
        "countries": len(catalog.cards),
    }
