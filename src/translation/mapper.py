"""English -> Spanish translation of SWAPI character records.

Two static tables drive everything:
- FIELD_MAP renames record keys
- VALUE_TRANSLATIONS replaces known values (case-insensitive lookup)

Unknown keys and values pass through untouched so the mapping degrades
gracefully when the upstream schema grows. Only one level of list nesting
is traversed; SWAPI records never nest deeper.
"""

import re
from typing import Any

FIELD_MAP: dict[str, str] = {
    "name": "nombre",
    "height": "altura",
    "mass": "masa",
    "hair_color": "color_de_cabello",
    "skin_color": "color_de_piel",
    "eye_color": "color_de_ojos",
    "birth_year": "año_de_nacimiento",
    "gender": "genero",
    "homeworld": "planeta_natal",
    "films": "peliculas",
    "species": "especies",
    "vehicles": "vehiculos",
    "starships": "naves_espaciales",
    "created": "creado",
    "edited": "editado",
    "url": "url",
}

# Keys are lowercase; lookups lowercase the candidate first
VALUE_TRANSLATIONS: dict[str, str] = {
    # Gender
    "male": "masculino",
    "female": "femenino",
    "hermaphrodite": "hermafrodita",
    "n/a": "n/a",
    "none": "ninguno",

    # Descriptive terms
    "blue": "azul",
    "blond": "rubio",

    # Sentinels
    "unknown": "desconocido",
}

# Trailing numeric path segment, optionally followed by one slash
_TRAILING_ID = re.compile(r"/(\d+)/?$")


def translate_field_name(name: Any) -> Any:
    """Return the Spanish field name, or the input unchanged when unmapped."""
    if not isinstance(name, str):
        return name
    return FIELD_MAP.get(name, name)


def translate_value(value: Any) -> Any:
    """Translate a known string value; everything else is returned as-is.

    Matching is case-insensitive, but an unmatched string comes back
    exactly as received (no case normalization).
    """
    if isinstance(value, str):
        return VALUE_TRANSLATIONS.get(value.lower(), value)
    return value


def translate_record(record: Any) -> dict | None:
    """Translate every key and value of a SWAPI record.

    Returns None for anything that is not a dict. The output has exactly
    one entry per input entry; list values are translated element-wise.
    """
    if not isinstance(record, dict):
        return None

    translated = {}
    for field, value in record.items():
        key = translate_field_name(field)
        if isinstance(value, list):
            translated[key] = [translate_value(item) for item in value]
        else:
            translated[key] = translate_value(value)
    return translated


def translate_records(records: Any) -> list[dict]:
    """Translate a list of records, dropping entries that are not records."""
    if not isinstance(records, list):
        return []

    translated = (translate_record(record) for record in records)
    return [record for record in translated if record is not None]


def extract_id_from_url(url: Any) -> str | None:
    """Pull the trailing numeric id out of a SWAPI resource URL.

    >>> extract_id_from_url("https://swapi.py4e.com/api/people/1/")
    '1'
    """
    if not url or not isinstance(url, str):
        return None

    match = _TRAILING_ID.search(url)
    return match.group(1) if match else None
