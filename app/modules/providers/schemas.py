from pydantic import BaseModel, Field, field_validator
from typing import Optional

from app.common.validators import ruc_field


class ProviderCreate(BaseModel):
    nombre_proveedor: str = Field(..., min_length=1, max_length=200)
    ruc: Optional[str] = Field(None, max_length=11)
    telefono: Optional[str] = Field(None, max_length=20)
    correo_electronico: Optional[str] = Field(None, max_length=150)

    @field_validator('ruc')
    @classmethod
    def validate_ruc(cls, v):
        return ruc_field(v)


class ProviderOption(BaseModel):
    """Proveedor para listas desplegables"""
    id_proveedor: int
    nombre_proveedor: str

    class Config:
        from_attributes = True


class ProviderOut(ProviderOption):
    ruc: Optional[str] = None
    telefono: Optional[str] = None
    correo_electronico: Optional[str] = None
    estado: str
