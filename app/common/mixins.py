"""
Common mixins for models
"""
from sqlalchemy import Column, DateTime
from sqlalchemy.sql import func


class TimestampMixin:
    """Mixin for models that need creation/update tracking"""

    fecha_creacion = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    fecha_actualizacion = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)


class StatusMixin:
    """Mixin for catalogs that are disabled instead of removed"""

    ESTADO_ACTIVO = "activo"
    ESTADO_INACTIVO = "inactivo"

    @property
    def is_active(self):
        return self.estado == self.ESTADO_ACTIVO

    def disable(self):
        self.estado = self.ESTADO_INACTIVO

    def enable(self):
        self.estado = self.ESTADO_ACTIVO
