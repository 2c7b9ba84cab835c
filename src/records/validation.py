"""Validation and sanitation of records submitted for creation.

Stages run in order and the handler stops at the first failing stage:
1. parse_body       - body present, valid JSON, a JSON object
2. check_required   - `nombre` is a non-blank string
3. check_types      - field types, numeric height/mass, gender enum
                      (all violations collected, not short-circuited)
4. sanitize         - only after everything above passed
"""

import copy
import json
import re
from dataclasses import dataclass, field

from src.records.models import (
    ARRAY_FIELDS,
    NUMERIC_FIELDS,
    REQUIRED_FIELDS,
    STRING_FIELDS,
    VALID_GENDERS,
)

# Plain decimal numeral: "182", "77.5", "-3", ".5"
_NUMERIC = re.compile(r"^\s*[-+]?(\d+(\.\d*)?|\.\d+)\s*$")


@dataclass
class ValidationResult:
    valid: bool
    error: str = ""
    data: dict | None = None
    missing_fields: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)


def parse_body(body: str | None) -> ValidationResult:
    """Decode the raw request body into a dict."""
    if not body:
        return ValidationResult(valid=False, error="El cuerpo de la petición está vacío")

    try:
        data = json.loads(body)
    except ValueError:
        return ValidationResult(
            valid=False, error="El cuerpo de la petición no es un JSON válido"
        )

    if not isinstance(data, dict):
        return ValidationResult(valid=False, error="El cuerpo debe ser un objeto JSON válido")

    return ValidationResult(valid=True, data=data)


def check_required(record: dict) -> ValidationResult:
    missing = [
        name for name in REQUIRED_FIELDS
        if not isinstance(record.get(name), str) or not record[name].strip()
    ]
    if missing:
        return ValidationResult(
            valid=False,
            error="Faltan campos obligatorios o están vacíos",
            missing_fields=missing,
        )
    return ValidationResult(valid=True)


def _is_numeric(value: str) -> bool:
    return bool(_NUMERIC.match(value))


def check_types(record: dict) -> ValidationResult:
    errors: list[str] = []

    for name in STRING_FIELDS:
        if name in record and not isinstance(record[name], str):
            errors.append(f'El campo "{name}" debe ser una cadena de texto')

    for name in ARRAY_FIELDS:
        if name in record and not isinstance(record[name], list):
            errors.append(f'El campo "{name}" debe ser un array')

    for name in NUMERIC_FIELDS:
        value = record.get(name)
        if isinstance(value, str) and value.strip() and not _is_numeric(value):
            errors.append(f'El campo "{name}" debe contener un valor numérico')

    # A present but blank gender is rejected too
    gender = record.get("genero")
    if isinstance(gender, str) and gender.strip().lower() not in VALID_GENDERS:
        errors.append(f'El campo "genero" debe ser uno de: {", ".join(VALID_GENDERS)}')

    if errors:
        return ValidationResult(
            valid=False,
            error="Errores de validación en los datos proporcionados",
            errors=errors,
        )
    return ValidationResult(valid=True)


def sanitize(record: dict) -> dict:
    """Trim strings, lowercase gender and default the array fields to []."""
    clean = copy.deepcopy(record)

    for key, value in clean.items():
        if isinstance(value, str):
            clean[key] = value.strip()

    if clean.get("genero"):
        clean["genero"] = clean["genero"].lower()

    for name in ARRAY_FIELDS:
        if not clean.get(name):
            clean[name] = []

    return clean
