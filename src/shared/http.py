"""HTTP error translation shared by all domain routers."""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from protean.integrations.fastapi import register_exception_handlers


async def _request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = {}
    for error in exc.errors():
        field = ".".join(str(part) for part in error["loc"] if part != "body") or "body"
        errors.setdefault(field, []).append(error["msg"])
    return JSONResponse(status_code=400, content={"error": errors})


def install_error_handlers(app: FastAPI) -> None:
    """Map domain and request-validation errors to HTTP responses.

    Protean's ValidationError becomes 400 and ObjectNotFoundError 404.
    Malformed request bodies are reported as 400 rather than FastAPI's 422.
    """
    register_exception_handlers(app)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
