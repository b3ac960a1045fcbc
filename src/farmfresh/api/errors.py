"""Maps domain exceptions to HTTP responses.

Protean's handlers cover ValidationError (400, including EmptyCart and
InsufficientStock) and ObjectNotFoundError (404). The rest are added here.
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from protean.integrations.fastapi import register_exception_handlers

from farmfresh.exceptions import Forbidden


def register_error_handlers(app: FastAPI) -> None:
    register_exception_handlers(app)

    @app.exception_handler(Forbidden)
    async def forbidden_handler(request: Request, exc: Forbidden) -> JSONResponse:
        return JSONResponse(status_code=403, content={"error": exc.messages})

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        messages = {}
        for error in exc.errors():
            field = ".".join(str(part) for part in error["loc"] if part != "body") or "_request"
            messages.setdefault(field, []).append(error["msg"])
        return JSONResponse(status_code=400, content={"error": messages})
