import json
from typing import List, Union

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables / .env"""

    PROJECT_NAME: str = "Employee API"
    API_PREFIX: str = "/api"

    DATABASE_URL: str = "sqlite:///./employees.db"

    # list, JSON string or comma separated string
    BACKEND_CORS_ORIGINS: Union[List[str], str] = []

    LOG_LEVEL: str = "INFO"
    JSON_LOGS: bool = False

    CREATE_TABLES_ON_STARTUP: bool = True
    SEED_SAMPLE_EMPLOYEE: bool = True

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    @field_validator("BACKEND_CORS_ORIGINS", mode="before")
    @classmethod
    def parse_cors_origins(cls, v: Union[List[str], str]) -> List[str]:
        if isinstance(v, str):
            if not v.strip():
                return []
            try:
                return json.loads(v)
            except json.JSONDecodeError:
                return [origin.strip() for origin in v.split(",")]
        return v


settings = Settings()
