from pydantic import BaseModel, Field
from decimal import Decimal
from typing import Optional
from datetime import date, datetime
from enum import Enum

from app.modules.users.schemas import UserSummary


class TipoFinanciero(str, Enum):
    INGRESO = "ingreso"
    EGRESO = "egreso"


class EstadoComputo(str, Enum):
    COMPUTADO = "computado"
    NO_COMPUTADO = "no_computado"


# Financial Category Schemas
class FinanceCategoryCreate(BaseModel):
    nombre_categoria: str = Field(..., min_length=1, max_length=100)
    tipo_categoria: TipoFinanciero
    descripcion: Optional[str] = None

    class Config:
        use_enum_values = True


class FinanceCategoryUpdate(BaseModel):
    nombre_categoria: Optional[str] = Field(None, min_length=1, max_length=100)
    tipo_categoria: Optional[TipoFinanciero] = None
    descripcion: Optional[str] = None

    class Config:
        use_enum_values = True


class FinanceCategoryOut(BaseModel):
    id_categoria_financiera: int
    nombre_categoria: str
    tipo_categoria: str
    descripcion: Optional[str] = None

    class Config:
        from_attributes = True


# Movement Schemas
class MovementCreate(BaseModel):
    tipo_movimiento: TipoFinanciero
    id_categoria_financiera: Optional[int] = Field(None, gt=0)
    razon: str = Field(..., min_length=1, max_length=255)
    monto: Decimal = Field(..., gt=0, description="Monto debe ser mayor a 0")
    fecha_movimiento: date
    numero_comprobante: Optional[str] = Field(None, max_length=50)
    numero_operacion_bancaria: Optional[str] = Field(None, max_length=50)
    descripcion: Optional[str] = None
    id_usuario_registro: int = Field(..., gt=0)

    class Config:
        use_enum_values = True


class MovementUpdate(BaseModel):
    tipo_movimiento: Optional[TipoFinanciero] = None
    id_categoria_financiera: Optional[int] = Field(None, gt=0)
    razon: Optional[str] = Field(None, min_length=1, max_length=255)
    monto: Optional[Decimal] = Field(None, gt=0)
    fecha_movimiento: Optional[date] = None
    numero_comprobante: Optional[str] = Field(None, max_length=50)
    numero_operacion_bancaria: Optional[str] = Field(None, max_length=50)
    descripcion: Optional[str] = None
    estado_computo: Optional[EstadoComputo] = None

    class Config:
        use_enum_values = True


class MovementOut(BaseModel):
    id_movimiento: int
    tipo_movimiento: str
    id_categoria_financiera: Optional[int] = None
    razon: str
    monto: Decimal
    fecha_movimiento: date
    numero_comprobante: Optional[str] = None
    numero_operacion_bancaria: Optional[str] = None
    descripcion: Optional[str] = None
    id_usuario_registro: int
    estado_computo: str
    fecha_creacion: Optional[datetime] = None
    categoria: Optional[FinanceCategoryOut] = None
    usuario: Optional[UserSummary] = None

    class Config:
        from_attributes = True


class MovementDeleted(BaseModel):
    message: str
    updated: MovementOut
