import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from config import settings
from routers import health, countries
from services.cache_service import create_store
from services.catalog_service import CountryCatalog
from utils.http_client import close_client
from utils.logging_config import setup_logging

logger = logging.getLogger(__name__)

app = FastAPI(title="Country Catalog", version="0.1.0")

app.state.limiter = countries.limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(countries.router)


def build_catalog() -> CountryCatalog:
    return CountryCatalog(
        countries_url=settings.countries_url,
        country_info_url=settings.country_info_url,
        store=create_store(),
    )


@app.get("/")
async def root():
    return {
        "name": "Country Catalog API",
        "version": "0.1.0",
        "endpoints": ["/health", "/countries", "/countries/regions", "/countries/{name}"],
    }


@app.on_event("startup")
async def startup():
    setup_logging()
    if getattr(app.state, "catalog", None) is None:
        app.state.catalog = build_catalog()

    catalog = app.state.catalog
    if not catalog.restore():
        await catalog.fetch_all()
    logger.info("Country Catalog API is running (%s)", catalog.state.value)


@app.on_event("shutdown")
async def shutdown():
    await close_client()
