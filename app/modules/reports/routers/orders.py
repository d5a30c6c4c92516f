"""
Orders Report Router

Reporte de pedidos con montos pagados y pendientes; exportable a CSV.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.database.database import get_db

from ..services.orders import OrderReportService
from ..schemas import ReportFilters, OrdersReportResponse
from ..utils import create_csv_response, build_filename, CSV_HEADERS
from .dependencies import get_report_filters


router = APIRouter(prefix="/orders", tags=["Reports"])


@router.get("", response_model=None)
def get_orders_report(
    filters: ReportFilters = Depends(get_report_filters),
    export: Optional[str] = Query(None, pattern="^(csv)$", description="Export format: csv"),
    db: Session = Depends(get_db)
):
    """
    Reporte de pedidos.

    Filtra por fecha de creación, vendedor y cliente. Los totales son la
    suma de las filas devueltas.
    """
    service = OrderReportService(db=db, filters=filters)
    report_data = service.get_orders_report()

    if export == "csv":
        return create_csv_response(
            data=report_data["pedidos"],
            filename=build_filename("reporte_pedidos", filters.start_date, filters.end_date),
            headers=CSV_HEADERS["orders"]
        )

    return OrdersReportResponse(**report_data)
