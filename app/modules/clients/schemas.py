from pydantic import BaseModel, EmailStr, Field, field_validator
from typing import Optional
from datetime import date, datetime

from app.common.validators import ruc_field, dni_field
from app.modules.users.schemas import UserSummary


TIPOS_CLIENTE = ("regular", "vip")


class ClientBase(BaseModel):
    ruc: Optional[str] = Field(None, max_length=11)
    nombre_completo: Optional[str] = Field(None, max_length=200)
    nombre_representante: Optional[str] = Field(None, max_length=150)
    cumpleanos_representante: Optional[date] = None
    telefono_principal: Optional[str] = Field(None, max_length=20)
    telefono_secundario: Optional[str] = Field(None, max_length=20)
    dni_representante: Optional[str] = Field(None, max_length=8)
    tipo_cliente: Optional[str] = None
    departamento: Optional[str] = Field(None, max_length=100)
    provincia: Optional[str] = Field(None, max_length=100)
    distrito: Optional[str] = Field(None, max_length=100)
    direccion: Optional[str] = None
    estado: Optional[str] = Field(None, pattern="^(activo|inactivo)$")

    @field_validator('ruc')
    @classmethod
    def validate_ruc(cls, v):
        return ruc_field(v)

    @field_validator('dni_representante')
    @classmethod
    def validate_dni(cls, v):
        return dni_field(v)

    @field_validator('tipo_cliente')
    @classmethod
    def validate_tipo_cliente(cls, v):
        if v is not None and v not in TIPOS_CLIENTE:
            raise ValueError(f"Tipo de cliente no válido. Use uno de: {', '.join(TIPOS_CLIENTE)}")
        return v


class ClientCreate(ClientBase):
    razon_social: str = Field(..., min_length=1, max_length=200)
    correo_electronico: EmailStr
    id_vendedor_asignado: int = Field(..., gt=0)

    @field_validator('correo_electronico')
    @classmethod
    def normalize_email(cls, v):
        return v.lower().strip()


class ClientUpdate(ClientBase):
    razon_social: Optional[str] = Field(None, min_length=1, max_length=200)
    correo_electronico: Optional[EmailStr] = None
    id_vendedor_asignado: Optional[int] = Field(None, gt=0)

    @field_validator('correo_electronico')
    @classmethod
    def normalize_email(cls, v):
        return v.lower().strip() if v else v


class ClientSummary(BaseModel):
    id_cliente: int
    razon_social: str
    nombre_completo: Optional[str] = None

    class Config:
        from_attributes = True


class ClientOut(ClientBase):
    id_cliente: int
    razon_social: str
    correo_electronico: str
    id_vendedor_asignado: int
    estado: str
    vendedor: Optional[UserSummary] = None
    fecha_creacion: Optional[datetime] = None

    class Config:
        from_attributes = True
