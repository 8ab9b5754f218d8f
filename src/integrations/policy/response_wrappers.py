from __future__ import annotations

import logging
from typing import Any, List, Type, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from src.integrations.contracts.envelope import ApiError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def ensure_json_shape(raw: Any, *, many: bool, status: int = 200) -> Any:
    """Check the decoded JSON is an object (or an array of objects when ``many``)."""
    if many:
        ok = isinstance(raw, list) and all(isinstance(item, dict) for item in raw)
    else:
        ok = isinstance(raw, dict)
    if not ok:
        logger.error("Unexpected JSON shape: %s", type(raw).__name__)
        raise ApiError.malformed(status, raw)
    return raw


def normalize_result(model_type: Type[ModelT], raw: Any, *, status: int = 200) -> ModelT:
    """Validate a decoded JSON object against its result model."""
    if not isinstance(raw, dict):
        logger.error("Expected a JSON object for %s, got %s", model_type.__name__, type(raw).__name__)
        raise ApiError.malformed(status, raw)
    return _build_model(model_type, raw, status)


def normalize_result_list(model_type: Type[ModelT], raw: Any, *, status: int = 200) -> List[ModelT]:
    """Validate a decoded JSON array whose items share one result model."""
    if not isinstance(raw, list):
        logger.error("Expected a JSON array of %s, got %s", model_type.__name__, type(raw).__name__)
        raise ApiError.malformed(status, raw)
    try:
        return TypeAdapter(List[model_type]).validate_python(raw)
    except ValidationError as exc:
        logger.error("Response validation failed for %s[]: %s", model_type.__name__, exc)
        raise ApiError.malformed(status, raw) from exc


def _build_model(model_type: Type[ModelT], raw: Any, status: int) -> ModelT:
    try:
        return model_type.model_validate(raw)
    except ValidationError as exc:
        logger.error("Response validation failed for %s: %s", model_type.__name__, exc)
        raise ApiError.malformed(status, raw) from exc
