"""GET /records/external/{id} — fetch a SWAPI character and translate it."""

import re

from fastapi.responses import JSONResponse

from src.catalog.client import CatalogClient
from src.config.settings import Settings
from src.errors import NotFoundError, UnavailableError
from src.handlers.responses import error_detail, error_response, success_response
from src.logging.request_log import get_logger

_CATALOG_ID = re.compile(r"[0-9]+")


def _parse_positive_int(raw) -> int | None:
    """Catalog numbers are plain ASCII digit strings; anything else is rejected."""
    text = str(raw).strip()
    if not _CATALOG_ID.fullmatch(text):
        return None
    value = int(text)
    return value if value > 0 else None


async def get_external_record(
    path_params: dict | None, catalog: CatalogClient, settings: Settings
) -> JSONResponse:
    """Validate the catalog id, fetch the character and classify failures."""
    logger = get_logger()
    raw_id = (path_params or {}).get("id")

    if raw_id is None:
        logger.warning("Catalog id missing")
        return error_response(
            400,
            "El ID del personaje es requerido",
            detalles="Debe proporcionar un ID válido en la ruta: /records/external/{id}",
        )

    catalog_id = _parse_positive_int(raw_id)
    if catalog_id is None:
        logger.warning("Catalog id rejected", extra={"log_data": {"id": raw_id}})
        return error_response(
            400,
            "El ID del personaje debe ser un número positivo",
            idRecibido=raw_id,
        )

    try:
        record = await catalog.get_person(catalog_id)
    except NotFoundError as e:
        logger.info("Character not in catalog", extra={"log_data": {"id": catalog_id}})
        return error_response(404, e.message, idBuscado=raw_id)
    except UnavailableError as e:
        logger.error("Catalog unreachable", extra={"log_data": {"error": e.message}})
        return error_response(
            503,
            "No se pudo conectar con el servicio de Star Wars",
            detalles=e.message,
        )
    except Exception as e:
        logger.exception("Catalog lookup failed")
        return error_response(
            500,
            "Ocurrió un error al procesar la solicitud",
            detalles=error_detail(e, settings.expose_error_details),
        )

    if not record:
        return error_response(
            404,
            f"No se encontró el personaje con ID {raw_id} en SWAPI",
            idBuscado=raw_id,
        )

    logger.info(
        "Character fetched from catalog",
        extra={"log_data": {"id": catalog_id, "nombre": record.get("nombre")}},
    )
    return success_response(200, "Personaje obtenido exitosamente desde SWAPI", record)
