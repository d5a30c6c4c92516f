from pydantic import BaseModel, Field
from decimal import Decimal
from typing import Optional, List
from datetime import datetime

from app.modules.clients.schemas import ClientSummary
from app.modules.products.schemas import ProductSummary
from app.modules.users.schemas import UserSummary


class ReturnItemCreate(BaseModel):
    id_producto: int = Field(..., gt=0)
    cantidad_devuelta: int = Field(..., gt=0)
    motivo_producto: Optional[str] = None


class ReturnItemOut(BaseModel):
    id_detalle_devolucion: int
    id_producto: int
    cantidad_devuelta: int
    motivo_producto: Optional[str] = None
    producto: Optional[ProductSummary] = None

    class Config:
        from_attributes = True


class ReturnCreate(BaseModel):
    id_pedido: int = Field(..., gt=0)
    id_cliente: int = Field(..., gt=0)
    id_vendedor: int = Field(..., gt=0)
    motivo: str = Field(..., min_length=1)
    estado_devolucion: Optional[str] = Field(None, max_length=30)
    detalles: List[ReturnItemCreate] = []


class ReturnUpdate(BaseModel):
    motivo: Optional[str] = Field(None, min_length=1)
    estado_devolucion: Optional[str] = Field(None, min_length=1, max_length=30)


class ReturnOrderRef(BaseModel):
    id_pedido: int
    total: Optional[Decimal] = None

    class Config:
        from_attributes = True


class ReturnOut(BaseModel):
    id_devolucion: int
    id_pedido: int
    id_cliente: int
    id_vendedor: int
    motivo: str
    estado_devolucion: str
    id_usuario_creacion: Optional[int] = None
    fecha_creacion: Optional[datetime] = None
    cliente: Optional[ClientSummary] = None
    vendedor: Optional[UserSummary] = None
    pedido: Optional[ReturnOrderRef] = None

    class Config:
        from_attributes = True


class ReturnDetail(ReturnOut):
    detalles: List[ReturnItemOut] = []
