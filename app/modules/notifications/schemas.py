from pydantic import BaseModel, Field, field_validator
from typing import Optional, List
from datetime import datetime


class NotificationCreate(BaseModel):
    tipo_notificacion: str = Field(..., min_length=1, max_length=50)
    detalle: str = Field(..., min_length=1)
    usuarios: List[int] = Field(..., min_length=1, description="IDs de usuarios destinatarios")

    @field_validator('usuarios')
    @classmethod
    def distinct_recipients(cls, v):
        # Conserva el orden de llegada
        return list(dict.fromkeys(v))


class RecipientOut(BaseModel):
    id_usuario: int
    leida: bool

    class Config:
        from_attributes = True


class NotificationOut(BaseModel):
    id_notificacion: int
    tipo_notificacion: str
    detalle: str
    enviada: bool
    fecha_envio: Optional[datetime] = None
    destinatarios: List[RecipientOut] = []

    class Config:
        from_attributes = True


class UserNotificationOut(BaseModel):
    """Notificación vista desde la bandeja de un usuario"""
    id_notificacion_usuario: int
    id_notificacion: int
    tipo_notificacion: str
    detalle: str
    fecha_envio: Optional[datetime] = None
    leida: bool
    fecha_lectura: Optional[datetime] = None
