"""Star Wars Records API — FastAPI application entry point.

Fetches characters from SWAPI translated to Spanish and persists locally
authored characters in DynamoDB.
"""

from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request

from src.catalog.client import CatalogClient
from src.catalog.factory import close_catalog_client, get_catalog_client
from src.config.settings import Settings, get_settings
from src.handlers.external import get_external_record
from src.handlers.records import create_record, get_record, list_records
from src.logging.request_log import (
    RequestTimer,
    generate_request_id,
    get_logger,
    request_id_var,
    setup_logging,
)
from src.records.factory import get_record_store
from src.records.store import RecordStore

VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown lifecycle hooks."""
    setup_logging(get_settings())
    get_logger().info("Records API started")
    yield
    await close_catalog_client()
    get_logger().info("Records API stopped")


app = FastAPI(
    title="Star Wars Records API",
    description="SWAPI characters translated to Spanish, plus local character records",
    version=VERSION,
    lifespan=lifespan,
)


def provide_catalog(settings: Settings = Depends(get_settings)) -> CatalogClient:
    return get_catalog_client(settings)


def provide_store(settings: Settings = Depends(get_settings)) -> RecordStore:
    return get_record_store(settings)


@app.middleware("http")
async def request_context(request: Request, call_next):
    """Tag every request with an id and log its outcome and latency."""
    rid = generate_request_id()
    token = request_id_var.set(rid)
    try:
        with RequestTimer() as timer:
            response = await call_next(request)
        get_logger().info(
            "Request handled",
            extra={"log_data": {
                "method": request.method,
                "path": request.url.path,
                "status": response.status_code,
                "latency_ms": timer.elapsed_ms,
            }},
        )
        response.headers["X-Request-Id"] = rid
        return response
    finally:
        request_id_var.reset(token)


@app.get("/health")
async def health():
    return {"status": "healthy", "version": VERSION}


@app.get("/records/external/{id}")
async def fetch_external_record(
    request: Request,
    catalog: CatalogClient = Depends(provide_catalog),
    settings: Settings = Depends(get_settings),
):
    """SWAPI character by catalog number, translated to Spanish."""
    return await get_external_record(request.path_params, catalog, settings)


@app.post("/records")
async def post_record(
    request: Request,
    store: RecordStore = Depends(provide_store),
    settings: Settings = Depends(get_settings),
):
    body = (await request.body()).decode("utf-8", errors="replace")
    return await create_record(body, store, settings)


@app.get("/records")
async def get_records(
    request: Request,
    store: RecordStore = Depends(provide_store),
    settings: Settings = Depends(get_settings),
):
    return await list_records(dict(request.query_params), store, settings)


@app.get("/records/{id}")
async def get_record_by_id(
    request: Request,
    store: RecordStore = Depends(provide_store),
    settings: Settings = Depends(get_settings),
):
    return await get_record(request.path_params, store, settings)
