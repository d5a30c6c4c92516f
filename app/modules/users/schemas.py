from pydantic import BaseModel, EmailStr, Field, field_validator
from typing import Optional
from datetime import datetime


ESTADOS_USUARIO = ("activo", "inactivo")


def _validate_estado(v):
    if v is not None and v not in ESTADOS_USUARIO:
        raise ValueError(f"Estado no válido. Use uno de: {', '.join(ESTADOS_USUARIO)}")
    return v


# Roles
class RoleCreate(BaseModel):
    nombre_rol: str = Field(..., min_length=1, max_length=50)
    descripcion: Optional[str] = Field(None, max_length=255)


class RoleOut(BaseModel):
    id_rol: int
    nombre_rol: str
    descripcion: Optional[str] = None

    class Config:
        from_attributes = True


# Usuarios
class UserCreate(BaseModel):
    correo_electronico: EmailStr
    nombre_completo: str = Field(..., min_length=1, max_length=150)
    contrasena: str = Field(..., min_length=6, max_length=128)
    id_rol: int = Field(..., gt=0)
    estado: Optional[str] = None

    @field_validator('correo_electronico')
    @classmethod
    def normalize_email(cls, v):
        return v.lower().strip()

    @field_validator('estado')
    @classmethod
    def validate_estado(cls, v):
        return _validate_estado(v)


class UserUpdate(BaseModel):
    correo_electronico: Optional[EmailStr] = None
    nombre_completo: Optional[str] = Field(None, min_length=1, max_length=150)
    contrasena: Optional[str] = Field(None, min_length=6, max_length=128)
    id_rol: Optional[int] = Field(None, gt=0)
    estado: Optional[str] = None

    @field_validator('correo_electronico')
    @classmethod
    def normalize_email(cls, v):
        return v.lower().strip() if v else v

    @field_validator('estado')
    @classmethod
    def validate_estado(cls, v):
        return _validate_estado(v)


class UserCreated(BaseModel):
    id_usuario: int
    correo_electronico: str
    nombre_completo: str
    estado: str

    class Config:
        from_attributes = True


class UserOut(UserCreated):
    """Usuario sin hash de contraseña"""
    id_rol: int
    rol: Optional[RoleOut] = None
    fecha_creacion: Optional[datetime] = None


class UserSummary(BaseModel):
    """Referencia corta a un usuario (vendedor, registrador)"""
    id_usuario: int
    nombre_completo: str

    class Config:
        from_attributes = True
