"""Entry payload validation.

Validates the writable column set of a vault entry against
`core/schemas/password_entry.schema.json` before it is sent to Supabase,
so the user gets field-level messages instead of a PostgREST error.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Tuple

import jsonschema

_SCHEMA_PATH = Path(__file__).resolve().parent / "schemas" / "password_entry.schema.json"

_schema_cache = None


def _load_schema() -> dict:
    with _SCHEMA_PATH.open("r", encoding="utf-8") as f:
        return json.load(f)


def validate_entry_payload(payload: Dict[str, Any]) -> Tuple[bool, List[str]]:
    """Validate an entry payload.

    Returns (valid, errors). If valid is True, errors==[].
    """
    global _schema_cache
    if _schema_cache is None:
        _schema_cache = _load_schema()
    validator = jsonschema.Draft7Validator(_schema_cache)
    errors = []
    for err in sorted(validator.iter_errors(payload), key=lambda e: list(map(str, e.path))):
        loc = "/".join(str(p) for p in err.absolute_path) or "(root)"
        errors.append(f"{loc}: {err.message}")
    return (not errors), errors
