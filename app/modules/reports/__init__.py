"""
Reports Module - Rey Automotriz

Reportes de pedidos y créditos sobre las tablas de otros módulos; no crea
tablas propias.

- routers/ -> endpoints FastAPI con filtros por query string
- services/ -> consultas y agregación de montos
- schemas/ -> filtros y respuestas Pydantic
- utils/ -> exportación CSV
"""

from .routers import reports_router

__all__ = ["reports_router"]
