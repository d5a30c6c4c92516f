"""
Credits Report Router

Reporte de cuotas de crédito con días de retraso; exportable a CSV.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.database.database import get_db

from ..services.credits import CreditReportService
from ..schemas import ReportFilters, CreditsReportResponse
from ..utils import create_csv_response, build_filename, CSV_HEADERS
from .dependencies import get_report_filters


router = APIRouter(prefix="/credits", tags=["Reports"])


@router.get("", response_model=None)
def get_credits_report(
    filters: ReportFilters = Depends(get_report_filters),
    export: Optional[str] = Query(None, pattern="^(csv)$", description="Export format: csv"),
    db: Session = Depends(get_db)
):
    """
    Reporte de créditos.

    Filtra por fecha programada de la cuota y por vendedor o cliente del
    pedido. dias_retraso solo cuenta para cuotas pendientes ya vencidas.
    """
    service = CreditReportService(db=db, filters=filters)
    report_data = service.get_credits_report()

    if export == "csv":
        return create_csv_response(
            data=report_data["cuotas"],
            filename=build_filename("reporte_creditos", filters.start_date, filters.end_date),
            headers=CSV_HEADERS["credits"]
        )

    return CreditsReportResponse(**report_data)
