from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel
from slowapi import Limiter
from slowapi.util import get_remote_address

from models.country import Card, Detail
from services.catalog_service import CountryCatalog
from services.filter_service import ALL, REGIONS

router = APIRouter(prefix="/countries", tags=["countries"])

limiter = Limiter(key_func=get_remote_address)


class RegionFilter(BaseModel):
    region: str = ""


class SearchFilter(BaseModel):
    search: str = ""


def _catalog(request: Request) -> CountryCatalog:
    return request.app.state.catalog


@router.get("", response_model=list[Card])
async def list_countries(request: Request):
    return _catalog(request).filtered()


@router.get("/regions", response_model=list[str])
async def list_regions():
    return [ALL, *REGIONS]


@router.post("/refresh", response_model=list[Card])
@limiter.limit("10/minute")
async def refresh_countries(request: Request):
    return await _catalog(request).fetch_all()


@router.put("/filters/region", response_model=list[Card])
async def set_region(request: Request, body: RegionFilter):
    return _catalog(request).set_region_filter(body.region)


@router.put("/filters/search", response_model=list[Card])
async def set_search(request: Request, body: SearchFilter):
    return _catalog(request).set_search_filter(body.search)


@router.get("/{name}", response_model=Detail)
@limiter.limit("30/minute")
async def get_country(request: Request, name: str):
    if not name.strip():
        raise HTTPException(status_code=400, detail="Country name cannot be empty")

    detail = await _catalog(request).fetch_detail(name)
    if detail is None:
        raise HTTPException(status_code=404, detail="Country not found")
    return detail
