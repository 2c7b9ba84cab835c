"""Catalog client singleton."""

from src.catalog.client import CatalogClient
from src.config.settings import Settings

_client: CatalogClient | None = None


def get_catalog_client(settings: Settings) -> CatalogClient:
    """Get or create the shared catalog client."""
    global _client
    if _client is None:
        _client = CatalogClient(
            base_url=settings.catalog_base_url,
            timeout=settings.catalog_timeout,
        )
    return _client


async def close_catalog_client() -> None:
    """Gracefully close the catalog connection pool on shutdown."""
    global _client
    if _client is not None:
        await _client.close()
        _client = None
