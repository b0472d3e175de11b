"""
Domain exceptions.

Services raise these; the global handlers in ``stockwatch.main`` turn them
into ``{"success": false, "error": {...}}`` responses.
"""
from typing import Any, Dict, List, Optional

from fastapi import HTTPException


class StockWatchException(Exception):
    code = "INTERNAL_ERROR"
    status_code = 500

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ValidationException(StockWatchException):
    """Malformed or missing input. Nothing was written."""

    code = "VALIDATION_ERROR"
    status_code = 400

    def __init__(self, message: str, fields: Optional[List[str]] = None):
        super().__init__(message, {"fields": fields or []})
        self.fields = fields or []


class ConflictException(StockWatchException):
    """A uniqueness rule was violated. Nothing was written."""

    code = "CONFLICT"
    status_code = 409


class EntityNotFoundException(StockWatchException):
    code = "NOT_FOUND"
    status_code = 404

    def __init__(self, entity: str, entity_id: Any):
        super().__init__(f"{entity} with id {entity_id} not found.", {"entity": entity, "id": entity_id})
        self.entity = entity
        self.entity_id = entity_id


class ServerException(StockWatchException):
    """Storage or transport failure; the outcome of a write is undetermined."""

    code = "SERVER_ERROR"
    status_code = 500


def error_body(exc: StockWatchException) -> Dict[str, Any]:
    body: Dict[str, Any] = {"code": exc.code, "message": exc.message}
    if isinstance(exc, ValidationException) and exc.fields:
        body["fields"] = exc.fields
    return body


def to_http_exception(exc: StockWatchException) -> HTTPException:
    return HTTPException(status_code=exc.status_code, detail=error_body(exc))
