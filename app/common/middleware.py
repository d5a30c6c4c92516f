"""
Middleware HTTP común a todas las rutas
"""
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
import logging
import time

from app.core.config import settings

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Registra método, ruta, código de respuesta y duración de cada petición"""

    async def dispatch(self, request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000

        logger.debug(f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.1f} ms)")

        return response


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """
    Cabeceras de seguridad en cada respuesta.

    HSTS solo se envía en producción, donde la API se sirve detrás de HTTPS.
    """

    headers = {
        "X-Content-Type-Options": "nosniff",
        "X-Frame-Options": "DENY",
        "Referrer-Policy": "strict-origin-when-cross-origin",
    }

    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)

        for name, value in self.headers.items():
            response.headers.setdefault(name, value)
        if settings.ENVIRONMENT == "production":
            response.headers["Strict-Transport-Security"] = "max-age=31536000; includeSubDomains"

        return response
