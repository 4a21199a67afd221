import json

from pydantic_settings import BaseSettings
from pydantic import field_validator
from pathlib import Path


class Settings(BaseSettings):
    countries_url: str = (
        "https://restcountries.com/v3.1/all?fields=name,capital,population,region,flags,cca3"
    )
    country_info_url: str = "https://restcountries.com/v3.1/name"
    request_timeout_seconds: float = 10.0
    cors_origins: list[str] = ["http://localhost:5173", "http://127.0.0.1:5173"]
    cache_ttl_seconds: int = 86400
    # Empty means keep the snapshot in memory only
    cache_path: str = ""
    log_level: str = "INFO"

    @field_validator("cors_origins", mode="before")
    @classmethod
    def parse_cors_origins(cls, v):
        if isinstance(v, str):
            # Accept JSON array or comma-separated string
            v = v.strip()
            if v.startswith("["):
                return json.loads(v)
            return [s.strip() for s in v.split(",") if s.strip()]
        return v

    model_config = {
        "env_file": str(Path(__file__).resolve().parent.parent / ".env"),
        "env_file_encoding": "utf-8",
    }


settings = Settings()
