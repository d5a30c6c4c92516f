"""
Base service class for Reports module

Provides the session, the common filters and the helpers shared by every
report: date range bounds, display names and day differences.
"""

from datetime import date, datetime, time, timedelta
from decimal import Decimal
from typing import Optional, Tuple

from sqlalchemy.orm import Session

from app.modules.orders.calculator import to_money
from app.modules.reports.schemas import ReportFilters

NOT_AVAILABLE = "N/A"


class BaseReportService:
    """Base service class for all report services"""

    def __init__(self, db: Session, filters: Optional[ReportFilters] = None, today: Optional[date] = None):
        self.db = db
        self.filters = filters or ReportFilters()
        self.today = today or date.today()

    def _date_bounds(self) -> Tuple[Optional[date], Optional[date]]:
        """Rango [start_date, end_date + 1 día) para incluir el día final completo"""
        start = self.filters.start_date
        end = self.filters.end_date + timedelta(days=1) if self.filters.end_date else None
        return start, end

    def _apply_date_filter(self, query, date_field):
        """Apply date range filter to a Date column"""
        start, end = self._date_bounds()
        if start:
            query = query.filter(date_field >= start)
        if end:
            query = query.filter(date_field < end)
        return query

    def _apply_datetime_filter(self, query, datetime_field):
        """Apply date range filter to a DateTime column"""
        start, end = self._date_bounds()
        if start:
            query = query.filter(datetime_field >= datetime.combine(start, time.min))
        if end:
            query = query.filter(datetime_field < datetime.combine(end, time.min))
        return query

    def _calculate_days_difference(self, from_date: date, to_date: date = None) -> int:
        """Calculate days difference between dates"""
        if to_date is None:
            to_date = self.today
        return (to_date - from_date).days

    @staticmethod
    def _seller_name(seller) -> str:
        return seller.nombre_completo if seller and seller.nombre_completo else NOT_AVAILABLE

    @staticmethod
    def _client_name(client) -> str:
        if not client:
            return NOT_AVAILABLE
        return client.nombre_completo or client.razon_social or NOT_AVAILABLE

    @staticmethod
    def _money(value) -> Decimal:
        return to_money(value or 0)
