from typing import Optional

from fastapi import HTTPException, Query, status
from pydantic import ValidationError

from ..schemas import ReportFilters


def get_report_filters(
    startDate: Optional[str] = Query(None, description="Fecha inicial ISO (inclusive)"),
    endDate: Optional[str] = Query(None, description="Fecha final ISO (inclusive)"),
    vendedor: Optional[str] = Query(None, description="id_usuario del vendedor"),
    cliente: Optional[str] = Query(None, description="id_cliente")
) -> ReportFilters:
    """Construir filtros desde el query string; ids no numéricos se ignoran"""
    try:
        return ReportFilters(
            start_date=startDate,
            end_date=endDate,
            vendedor=vendedor,
            cliente=cliente
        )
    except ValidationError as e:
        error = e.errors()[0]
        if error.get("type", "").startswith("date"):
            message = f"Fecha no válida: {error.get('input')}"
        else:
            message = str(error.get("msg", "Filtros no válidos")).removeprefix("Value error, ")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=message)
