"""Handlers for locally stored records: create, get by id, list.

Pipeline (create): parse body -> required fields -> types -> sanitize ->
mint id + timestamps -> persist.
"""

import re
from datetime import datetime
from functools import cmp_to_key

from fastapi.responses import JSONResponse

from src.config.settings import Settings
from src.errors import ConfigurationError, ConflictError, UnavailableError
from src.handlers.responses import error_detail, error_response, success_response
from src.logging.request_log import get_logger
from src.records import models
from src.records.store import RecordStore
from src.records.validation import check_required, check_types, parse_body, sanitize

DEFAULT_LIMIT = 50
MAX_LIMIT = 100

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def _store_failure(e: Exception, settings: Settings, action: str) -> JSONResponse:
    """Map a read-side store failure to 503/500."""
    logger = get_logger()
    if isinstance(e, UnavailableError):
        logger.error("Record store unreachable", extra={"log_data": {"error": e.message}})
        return error_response(
            503,
            "No se pudo acceder a la base de datos",
            detalles="Error al consultar DynamoDB",
        )
    if isinstance(e, ConfigurationError):
        logger.error("Record store misconfigured", extra={"log_data": {"error": e.message}})
        return error_response(
            500,
            "Error de configuración del servidor",
            detalles=error_detail(e, settings.expose_error_details, "Configuración incompleta"),
        )
    logger.exception(f"Unexpected error while {action}")
    return error_response(
        500,
        "Ocurrió un error al procesar la solicitud",
        detalles=error_detail(e, settings.expose_error_details),
    )


async def create_record(body: str | None, store: RecordStore, settings: Settings) -> JSONResponse:
    logger = get_logger()

    parsed = parse_body(body)
    if not parsed.valid:
        logger.warning("Invalid request body", extra={"log_data": {"reason": parsed.error}})
        return error_response(400, parsed.error)

    data = parsed.data

    required = check_required(data)
    if not required.valid:
        logger.warning(
            "Required fields missing",
            extra={"log_data": {"missing_fields": required.missing_fields}},
        )
        return error_response(
            400,
            required.error,
            camposFaltantes=required.missing_fields,
            ejemplo=models.EXAMPLE_RECORD,
        )

    types = check_types(data)
    if not types.valid:
        logger.warning("Field type errors", extra={"log_data": {"errors": types.errors}})
        return error_response(400, types.error, errores=types.errors)

    record = sanitize(data)
    record["id"] = models.new_record_id()
    timestamp = models.utc_timestamp()
    record["creado"] = timestamp
    record["actualizado"] = timestamp

    try:
        saved = await store.create(record)
    except ConflictError as e:
        logger.warning("Duplicate record id", extra={"log_data": {"id": record["id"]}})
        return error_response(409, e.message)
    except Exception as e:
        logger.exception("Failed to persist record")
        return error_response(
            500,
            "Ocurrió un error al crear el personaje",
            detalles=error_detail(e, settings.expose_error_details),
        )

    logger.info(
        "Record created",
        extra={"log_data": {"id": saved["id"], "nombre": saved["nombre"]}},
    )
    return success_response(201, "Personaje creado exitosamente", saved)


async def get_record(path_params: dict | None, store: RecordStore, settings: Settings) -> JSONResponse:
    logger = get_logger()
    record_id = (path_params or {}).get("id")

    if record_id is None:
        logger.warning("Record id missing")
        return error_response(
            400,
            "El ID del personaje es requerido",
            detalles="Debe proporcionar un ID válido en la ruta: /records/{id}",
        )

    if not isinstance(record_id, str) or not record_id.strip():
        logger.warning("Record id rejected", extra={"log_data": {"id": record_id}})
        return error_response(
            400,
            "El ID del personaje debe ser una cadena válida",
            idRecibido=record_id,
        )

    try:
        record = await store.get(record_id)
    except Exception as e:
        return _store_failure(e, settings, "reading record")

    if not record:
        logger.info("Record not found", extra={"log_data": {"id": record_id}})
        return error_response(
            404,
            f"No se encontró el personaje con ID {record_id}",
            idBuscado=record_id,
            sugerencia="Verifique que el ID sea correcto o cree un nuevo personaje usando POST /records",
        )

    return success_response(200, "Personaje obtenido exitosamente", record)


def resolve_limit(query_params: dict | None) -> int:
    """Page size from `limite` (or `limit`): default 50, capped at 100."""
    params = query_params or {}
    raw = params.get("limite") or params.get("limit")
    if raw is None:
        return DEFAULT_LIMIT

    # Leading integer wins: "30.0" -> 30, "12abc" -> 12
    match = _LEADING_INT.match(str(raw))
    if match is None:
        get_logger().warning("Invalid limit, using default", extra={"log_data": {"limite": raw}})
        return DEFAULT_LIMIT

    limit = int(match.group(1))
    if limit <= 0:
        return DEFAULT_LIMIT
    return min(limit, MAX_LIMIT)


def _parse_timestamp(value) -> datetime | None:
    if not value or not isinstance(value, str):
        return None
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        return None


def _newest_first(a: dict, b: dict) -> int:
    # Either side without a usable timestamp compares equal
    created_a = _parse_timestamp(a.get("creado"))
    created_b = _parse_timestamp(b.get("creado"))
    if created_a is None or created_b is None:
        return 0
    try:
        if created_a > created_b:
            return -1
        if created_a < created_b:
            return 1
    except TypeError:  # naive vs aware
        return 0
    return 0


def sort_newest_first(records: list[dict]) -> list[dict]:
    return sorted(records, key=cmp_to_key(_newest_first))


async def list_records(query_params: dict | None, store: RecordStore, settings: Settings) -> JSONResponse:
    logger = get_logger()
    limit = resolve_limit(query_params)

    try:
        records = await store.scan(limit)
    except Exception as e:
        return _store_failure(e, settings, "listing records")

    logger.info("Records listed", extra={"log_data": {"count": len(records), "limite": limit}})

    if not records:
        return success_response(200, "No hay personajes almacenados", [], total=0, limite=limit)

    ordered = sort_newest_first(records)
    return success_response(
        200,
        "Personajes obtenidos exitosamente",
        ordered,
        total=len(ordered),
        limite=limit,
    )
