# model_manager/api/v1/errors.py
from fastapi import HTTPException

from ...domain.errors import AlreadyExistsError, NotFoundError, StoreError, UnavailableError


def to_http(exc: StoreError) -> HTTPException:
    """Map a store error onto the status code the caller sees."""
    if isinstance(exc, NotFoundError):
        return HTTPException(status_code=404, detail=str(exc))
    if isinstance(exc, AlreadyExistsError):
        return HTTPException(status_code=409, detail=str(exc))
    if isinstance(exc, UnavailableError):
        return HTTPException(status_code=503, detail="Storage unavailable")
    return HTTPException(status_code=500, detail="Storage error")
