from pydantic import BaseModel, Field
from decimal import Decimal
from typing import Optional, List
from datetime import date, datetime
from enum import Enum

from app.modules.clients.schemas import ClientSummary
from app.modules.products.schemas import ProductSummary
from app.modules.users.schemas import UserSummary


class TipoPago(str, Enum):
    CONTADO = "contado"
    CREDITO = "credito"


class TipoComprobante(str, Enum):
    BOLETA = "boleta"
    FACTURA = "factura"
    GUIA = "guia"


class EstadoPago(str, Enum):
    PENDIENTE = "pendiente"
    PAGADO = "pagado"


# Order Line Item Schemas
class OrderItemCreate(BaseModel):
    id_producto: int = Field(..., gt=0)
    cantidad: int = Field(..., gt=0, description="Cantidad debe ser mayor a 0")
    precio_unitario: Decimal = Field(..., ge=0, decimal_places=4, description="Precio unitario sin IGV, hasta 4 decimales")


class OrderItemOut(BaseModel):
    id_detalle: int
    id_producto: int
    cantidad: int
    precio_unitario: Decimal
    subtotal: Decimal
    descuento_porcentaje: Decimal
    descuento_monto: Decimal
    porcentaje_comision: Decimal
    monto_comision: Decimal
    producto: Optional[ProductSummary] = None

    class Config:
        from_attributes = True


# Installment Schemas
class InstallmentCreate(BaseModel):
    numero_cuota: int = Field(..., gt=0)
    monto_cuota: Decimal = Field(..., gt=0)
    fecha_pago_programada: date


class InstallmentPayment(BaseModel):
    monto_pagado: Decimal = Field(..., gt=0, description="Monto abonado a la cuota")
    fecha_pago_real: Optional[date] = None


class InstallmentOut(BaseModel):
    id_pago: int
    id_pedido: int
    numero_cuota: int
    monto_cuota: Decimal
    monto_pagado: Decimal
    saldo_pendiente: Decimal
    fecha_pago_programada: date
    fecha_pago_real: Optional[date] = None
    estado_pago: str

    class Config:
        from_attributes = True


# Order Schemas
class OrderCreate(BaseModel):
    id_cliente: int = Field(..., gt=0)
    id_vendedor: int = Field(..., gt=0)
    tipo_pago: TipoPago
    tipo_comprobante: TipoComprobante
    items: List[OrderItemCreate] = Field(..., min_length=1, description="Debe incluir al menos un item")
    observaciones: Optional[str] = None

    class Config:
        use_enum_values = True


class OrderUpdate(BaseModel):
    tipo_pago: Optional[TipoPago] = None
    tipo_comprobante: Optional[TipoComprobante] = None
    estado_pedido: Optional[str] = Field(None, min_length=1, max_length=30)
    observaciones: Optional[str] = None

    class Config:
        use_enum_values = True


class OrderOut(BaseModel):
    id_pedido: int
    id_cliente: int
    id_vendedor: int
    tipo_pago: str
    tipo_comprobante: str
    estado_pedido: str
    observaciones: Optional[str] = None
    subtotal: Decimal
    igv: Decimal
    total: Decimal
    id_usuario_creacion: Optional[int] = None
    fecha_creacion: Optional[datetime] = None

    class Config:
        from_attributes = True


class OrderListItem(OrderOut):
    cliente: Optional[ClientSummary] = None
    vendedor: Optional[UserSummary] = None


class OrderCreated(OrderOut):
    detalles: List[OrderItemOut] = []


class OrderDetail(OrderListItem):
    detalles: List[OrderItemOut] = []
    pagos: List[InstallmentOut] = []
