"""SWAPI client — fetches character records and translates them to Spanish."""

import httpx

from src.errors import CatalogError, NotFoundError, UnavailableError
from src.logging.request_log import get_logger
from src.translation.mapper import translate_record, translate_records

_UNREACHABLE = "No se pudo conectar con SWAPI. Verifica tu conexión a internet"


class CatalogClient:
    """Reads the people collection of the Star Wars catalog.

    One request per call, no retries. A timeout counts as a connectivity
    failure.
    """

    def __init__(self, base_url: str, timeout: float = 10.0):
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self._timeout),
                headers={"Accept": "application/json"},
            )
        return self._client

    async def _get(self, path: str, params: dict | None = None) -> httpx.Response:
        url = f"{self._base_url}{path}"
        client = await self._get_client()
        try:
            return await client.get(url, params=params)
        except httpx.TransportError:
            # Connect failures, timeouts, resets: no response was received
            raise UnavailableError(_UNREACHABLE)
        except httpx.HTTPError as e:
            raise CatalogError(f"Error al procesar la petición: {e}")

    @staticmethod
    def _json(response: httpx.Response):
        try:
            return response.json()
        except ValueError:
            raise CatalogError("SWAPI devolvió una respuesta que no es JSON")

    @classmethod
    def _json_page(cls, response: httpx.Response) -> dict:
        data = cls._json(response)
        if not isinstance(data, dict):
            raise CatalogError("SWAPI devolvió una página con formato inesperado")
        return data

    async def get_person(self, person_id: str | int) -> dict | None:
        """Fetch one character by catalog number, translated.

        Returns None if SWAPI answers 200 with something that is not a record.
        """
        person_id = str(person_id).strip()
        if not (person_id.isascii() and person_id.isdigit()):
            raise ValueError("El ID del personaje debe ser un número válido")

        get_logger().info(
            "Fetching character from catalog",
            extra={"log_data": {"catalog_id": person_id}},
        )
        response = await self._get(f"/people/{person_id}/")

        if response.status_code == 404:
            raise NotFoundError(f"Personaje con ID {person_id} no encontrado en SWAPI")
        if response.status_code != 200:
            raise CatalogError(
                f"Error de SWAPI: {response.status_code} - {response.reason_phrase}"
            )

        return translate_record(self._json(response))

    async def list_people(self, page: int = 1) -> dict:
        """Fetch one page of characters with SWAPI's pagination metadata."""
        response = await self._get("/people/", params={"page": page})

        if response.status_code == 404:
            raise NotFoundError(f"Página {page} no encontrada")
        if response.status_code != 200:
            raise CatalogError(
                f"Error al obtener personajes: {response.status_code} - {response.reason_phrase}"
            )

        data = self._json_page(response)
        return {
            "total": data.get("count", 0),
            "siguiente": data.get("next"),
            "anterior": data.get("previous"),
            "personajes": translate_records(data.get("results", [])),
        }

    async def search_people(self, name: str) -> list[dict]:
        """Search characters by (partial) name."""
        if not name or not isinstance(name, str):
            raise ValueError("El nombre de búsqueda debe ser una cadena válida")

        response = await self._get("/people/", params={"search": name})
        if response.status_code != 200:
            raise CatalogError(
                f"Error al buscar personaje: {response.status_code} - {response.reason_phrase}"
            )

        return translate_records(self._json_page(response).get("results", []))

    async def close(self) -> None:
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None
