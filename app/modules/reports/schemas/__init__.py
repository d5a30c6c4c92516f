"""
Pydantic schemas for Reports module

Filtros comunes y respuestas de los reportes. Los nombres de campo de las
respuestas son los que consume el panel web.
"""

from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator, model_validator


def _optional_int(value):
    """Ids no numéricos o vacíos se ignoran"""
    if value is None:
        return None
    if isinstance(value, int):
        return value
    value = str(value).strip()
    return int(value) if value.isdigit() else None


class ReportFilters(BaseModel):
    """Filtros comunes: rango de fechas inclusivo, vendedor y cliente"""
    start_date: Optional[date] = Field(None, description="Fecha inicial (inclusive)")
    end_date: Optional[date] = Field(None, description="Fecha final (inclusive)")
    vendedor: Optional[int] = Field(None, description="id_usuario del vendedor")
    cliente: Optional[int] = Field(None, description="id_cliente")

    @field_validator('start_date', 'end_date', mode='before')
    @classmethod
    def empty_date(cls, v):
        if isinstance(v, str) and v.strip() == "":
            return None
        return v

    @field_validator('vendedor', 'cliente', mode='before')
    @classmethod
    def parse_id(cls, v):
        return _optional_int(v)

    @model_validator(mode='after')
    def validate_range(self):
        if self.start_date and self.end_date and self.end_date < self.start_date:
            raise ValueError('La fecha final debe ser mayor o igual a la fecha inicial')
        return self


# Orders Report
class OrderReportRow(BaseModel):
    id_pedido: int
    fecha: Optional[datetime] = None
    vendedor: str
    cliente: str
    tipo_pago: str
    tipo_comprobante: str
    total: Decimal
    pagado: Decimal
    pendiente: Decimal


class OrdersReportResponse(BaseModel):
    totalPedidos: int
    montoTotal: Decimal
    montoPagado: Decimal
    montoPendiente: Decimal
    pedidos: List[OrderReportRow]


# Credits Report
class CreditReportRow(BaseModel):
    id_pedido: int
    numero_cuota: int
    fecha_pago: date
    dias_retraso: int
    monto: Decimal
    pagado: Decimal
    pendiente: Decimal
    estado: str
    vendedor: str
    cliente: str


class CreditsReportResponse(BaseModel):
    totalCreditos: int
    montoTotalCreditos: Decimal
    montoPagadoCreditos: Decimal
    montoPendienteCreditos: Decimal
    cuotas: List[CreditReportRow]


# Dashboard summary
class SummaryResponse(BaseModel):
    productsCount: int
    usersCount: int
    ordersCount: int
    returnsCount: int
    totalIngresos: Decimal
    totalEgresos: Decimal
