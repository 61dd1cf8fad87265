"""
Error taxonomy for the ship registry.

The service layer raises ShipServiceError subclasses; endpoints turn them
into HTTP responses. Unexpected failures during single-ship operations are
reported as InvalidShipError too, so clients only ever see 400 or 404.
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ShipServiceError(Exception):
    """Base class for ship service errors."""
    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidShipError(ShipServiceError):
    """Bad id, invalid ship fields, or a failed write."""
    status_code = status.HTTP_400_BAD_REQUEST


class ShipNotFoundError(ShipServiceError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, ship_id: int):
        self.ship_id = ship_id
        super().__init__(f"Ship {ship_id} not found")


def register_error_handlers(app: FastAPI) -> None:
    """Malformed path, query or body values are client errors (400), not 422."""

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.warning(f"⚠️ Rejected request to {request.url.path}: {exc.errors()}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": jsonable_encoder(exc.errors())},
        )
