# Request body validation for movie drafts
# movies_api/core/validation.py

import logging
from typing import Any, Dict, List, Type, Union

from pydantic import BaseModel, ValidationError

from movies_api.models.movie import MovieCreate, MovieUpdate, Violation

logger = logging.getLogger(__name__)


class ValidationOk(BaseModel):
    """Successful validation. `data` holds only the validated fields."""
    data: Dict[str, Any]


class ValidationFailed(BaseModel):
    """Failed validation with one violation per offending field."""
    violations: List[Violation]


ValidationResult = Union[ValidationOk, ValidationFailed]


def to_violations(error: ValidationError) -> List[Violation]:
    """Converts a pydantic ValidationError into the API's violation list."""
    return [
        Violation(code=err["type"], path=list(err["loc"]), message=err["msg"])
        for err in error.errors(include_url=False)
    ]


def _validate(schema: Type[BaseModel], raw: Any, partial: bool) -> ValidationResult:
    try:
        draft = schema.model_validate(raw)
    except ValidationError as e:
        violations = to_violations(e)
        logger.debug(f"{schema.__name__} rejected with {len(violations)} violation(s)")
        return ValidationFailed(violations=violations)
    # Partial drafts only carry the fields the client actually sent
    return ValidationOk(data=draft.model_dump(exclude_unset=partial))


def validate_movie(raw: Any) -> ValidationResult:
    """Validates a full movie draft. `rate` falls back to 0 when absent."""
    return _validate(MovieCreate, raw, partial=False)


def validate_partial_movie(raw: Any) -> ValidationResult:
    """Validates a partial movie draft; absent fields are left out of the result."""
    return _validate(MovieUpdate, raw, partial=True)
