"""Turn FastAPI request validation errors into field-level violations.

Pydantic reports errors with a location tuple such as ("body", "nome") or
("query", "pagina"). The last string in that tuple names the offending field;
known fields get a fixed localized message, anything else keeps the
validator's own text.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from game_catalog.config import settings
from game_catalog.dependencies import MAX_PAGE
from game_catalog.schemas.error import ErrorDetail, ErrorResponse, FieldViolation

FIELD_MESSAGES: dict[str, str] = {
    "nome": "O nome do jogo deve conter entre 3 e 100 caracteres",
    "produtora": "O nome da produtora deve conter entre 3 e 100 caracteres",
    "preco": "O preço deve ser de, no mínimo, R$ 1,00 e, no máximo, R$ 1000,00",
    "pagina": f"A página deve estar entre 1 e {MAX_PAGE}",
    "quantidade": f"A quantidade deve estar entre 1 e {settings.max_page_size}",
    "game_id": "O id do jogo deve ser um UUID válido",
}


def _field_name(loc: Iterable[Any]) -> str:
    names = [part for part in loc if isinstance(part, str)]
    return names[-1] if names else "body"


def field_violations(errors: Iterable[Mapping[str, Any]]) -> list[FieldViolation]:
    """One violation per offending field, in the order pydantic reported them."""
    violations: dict[str, FieldViolation] = {}
    for error in errors:
        field = _field_name(error.get("loc", ()))
        if field in violations:
            continue
        message = FIELD_MESSAGES.get(field, error.get("msg", "Invalid value"))
        violations[field] = FieldViolation(field=field, message=message)
    return list(violations.values())


def validation_body(violations: list[FieldViolation]) -> dict[str, object]:
    """Standard error envelope carrying the violations list."""
    detail = ErrorDetail(
        code="validation_error",
        message="Request validation failed",
        fields=violations,
    )
    return ErrorResponse(error=detail).model_dump()
