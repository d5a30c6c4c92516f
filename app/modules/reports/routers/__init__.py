"""
Routers package for Reports module

Agrupa los routers de cada reporte bajo un único router.
"""

from fastapi import APIRouter

from .orders import router as orders_report_router
from .credits import router as credits_report_router
from .summary import router as summary_router

reports_router = APIRouter()
reports_router.include_router(orders_report_router)
reports_router.include_router(credits_report_router)
reports_router.include_router(summary_router)

__all__ = ["reports_router"]
