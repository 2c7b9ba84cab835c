"""Application settings loaded from environment variables."""

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # External catalog (SWAPI)
    catalog_base_url: str = "https://swapi.py4e.com/api"
    catalog_timeout: float = 10.0  # seconds

    # Record store
    record_store_backend: str = "dynamodb"  # "dynamodb" | "memory"
    records_table: str = ""  # required for the dynamodb backend
    aws_region: str = "us-east-2"
    dynamodb_endpoint: str = ""  # e.g. http://localhost:8000 for DynamoDB Local

    # Runtime
    stage: str = "dev"
    environment: str = "development"  # development | test | production

    # Logging
    log_level: str = "INFO"
    log_file: str = ""  # Empty = stdout only

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    @property
    def expose_error_details(self) -> bool:
        """Raw failure messages are only returned to callers outside production."""
        return self.environment.lower() != "production"


@lru_cache
def get_settings() -> Settings:
    return Settings()
