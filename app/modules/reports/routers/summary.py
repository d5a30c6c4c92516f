from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.database.database import get_db

from ..services.summary import SummaryReportService
from ..schemas import SummaryResponse


router = APIRouter(prefix="/summary", tags=["Reports"])


@router.get("", response_model=SummaryResponse)
def get_summary(db: Session = Depends(get_db)):
    """Conteos y totales de ingresos y egresos computados para el tablero"""
    service = SummaryReportService(db=db)
    return service.get_summary()
