"""Shape of a locally stored character record.

Records are plain dicts keyed by the Spanish field names produced by
src.translation.mapper. These constants describe which fields carry which
type and how identity/timestamps are minted.
"""

import uuid
from datetime import datetime, timezone

REQUIRED_FIELDS = ("nombre",)

STRING_FIELDS = (
    "nombre",
    "altura",
    "masa",
    "color_de_cabello",
    "color_de_piel",
    "color_de_ojos",
    "año_de_nacimiento",
    "genero",
    "planeta_natal",
)

ARRAY_FIELDS = ("peliculas", "especies", "vehiculos", "naves_espaciales")

NUMERIC_FIELDS = ("altura", "masa")

VALID_GENDERS = ("masculino", "femenino", "hermafrodita", "n/a", "desconocido")

EXAMPLE_RECORD = {
    "nombre": "Obi-Wan Kenobi",
    "altura": "182",
    "masa": "77",
    "color_de_cabello": "castaño",
    "color_de_ojos": "azul",
    "genero": "masculino",
}


def new_record_id() -> str:
    return str(uuid.uuid4())


def utc_timestamp() -> str:
    """Current UTC time as e.g. 2026-01-08T10:00:00.000Z."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")
