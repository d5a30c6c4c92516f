from sqlalchemy import Column, Integer, String, ForeignKey, Boolean, DateTime, Text, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from app.database.database import Base


class Notificacion(Base):
    __tablename__ = "notificaciones"

    id_notificacion = Column(Integer, primary_key=True, autoincrement=True)
    tipo_notificacion = Column(String(50), nullable=False)
    detalle = Column(Text, nullable=False)
    enviada = Column(Boolean, nullable=False, default=False)
    fecha_envio = Column(DateTime(timezone=True), nullable=True)
    fecha_creacion = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    # Relationships
    destinatarios = relationship(
        "NotificacionUsuario", back_populates="notificacion", cascade="all, delete-orphan"
    )


class NotificacionUsuario(Base):
    """Estado de lectura de una notificación para un usuario"""
    __tablename__ = "notificacion_usuarios"

    id_notificacion_usuario = Column(Integer, primary_key=True, autoincrement=True)
    id_notificacion = Column(
        Integer, ForeignKey("notificaciones.id_notificacion", ondelete="CASCADE"), nullable=False, index=True
    )
    id_usuario = Column(Integer, ForeignKey("usuarios.id_usuario"), nullable=False, index=True)
    leida = Column(Boolean, nullable=False, default=False)
    fecha_lectura = Column(DateTime(timezone=True), nullable=True)

    # Relationships
    notificacion = relationship("Notificacion", back_populates="destinatarios")
    usuario = relationship("Usuario")

    __table_args__ = (
        UniqueConstraint("id_notificacion", "id_usuario", name="uq_notificacion_usuario"),
    )
