"""
Services package for Reports module

Exports all report service classes for easy importing.
"""

from .orders import OrderReportService
from .credits import CreditReportService
from .summary import SummaryReportService

__all__ = [
    "OrderReportService",
    "CreditReportService",
    "SummaryReportService"
]
