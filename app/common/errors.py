"""
Manejadores de errores de la API

Todas las respuestas de error siguen el contrato {"error": "<mensaje>"}.
"""
import logging

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


def error_response(status_code: int, message: str, headers: dict = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)


def _describe_validation_error(err: dict) -> str:
    """Traduce el primer error de Pydantic a un mensaje legible."""
    loc = [str(p) for p in err.get("loc", []) if p not in ("body", "query", "path")]
    field = ".".join(loc)
    if err.get("type") == "missing":
        return f"Datos incompletos: falta el campo '{field}'" if field else "Datos incompletos"
    if err.get("type") == "too_short" and field:
        return f"Datos incompletos: '{field}' no puede estar vacío"
    msg = err.get("msg", "Valor inválido")
    # Los ValueError de validadores propios llegan como "Value error, <mensaje>"
    if msg.startswith("Value error, "):
        msg = msg[len("Value error, "):]
    return f"{field}: {msg}" if field else msg


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    detail = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
    return error_response(exc.status_code, detail, getattr(exc, "headers", None))


async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    """Registra los errores de validación y responde 400 con el primer mensaje."""
    errs = exc.errors()
    flat = [
        {"loc": ".".join(str(p) for p in e.get("loc", [])), "msg": e.get("msg", ""), "type": e.get("type", "")}
        for e in errs
    ]
    logger.warning("Validación fallida 400 %s %s: %s", request.method, request.url.path, flat)
    message = _describe_validation_error(errs[0]) if errs else "Datos inválidos"
    return error_response(status.HTTP_400_BAD_REQUEST, message)


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error(f"Error no controlado en {request.method} {request.url.path}: {exc}", exc_info=True)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Error interno del servidor")


def register_exception_handlers(app) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
