# shop_api/api/errors.py
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from shop_api.domain.errors import ShopError
from shop_api.utils.logging import get_logger

logger = get_logger(__name__)


def _body(status_code: int, error: str, message) -> dict:
    return {"statusCode": status_code, "error": error, "message": message}


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(ShopError)
    async def shop_error_handler(request: Request, exc: ShopError):
        return JSONResponse(
            status_code=exc.status_code,
            content=_body(exc.status_code, exc.error, exc.message),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        """Bledy walidacji body/query jako 400, zanim dotkniemy logiki."""
        messages = []
        for err in exc.errors():
            # pierwszy element loc to "body" / "query" / "path"
            field = ".".join(str(part) for part in err.get("loc", ())[1:])
            messages.append(f"{field}: {err.get('msg')}" if field else err.get("msg"))
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_body(status.HTTP_400_BAD_REQUEST, "Bad Request", messages),
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled exception on {request.method} {request.url.path}: {exc}", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=_body(500, "Internal Server Error", "Internal server error"),
        )
