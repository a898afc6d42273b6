"""Translation of domain errors to HTTP errors"""
import logging

from fastapi import HTTPException, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from todo_api.domain.errors import DomainError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)


def to_http_exception(error: DomainError) -> HTTPException:
    """Map ValidationError to 400, NotFoundError to 404, anything else to 500"""
    if isinstance(error, ValidationError):
        return HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(error),
        )
    if isinstance(error, NotFoundError):
        return HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(error),
        )
    logger.error("Unexpected error: %s", error, exc_info=error)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="Internal server error",
    )


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Answer malformed bodies, params and IDs with 400 instead of 422"""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )
