from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship

from app.database.database import Base
from app.common.mixins import TimestampMixin, StatusMixin


class Role(Base):
    __tablename__ = "roles"

    id_rol = Column(Integer, primary_key=True, autoincrement=True)
    nombre_rol = Column(String(50), unique=True, nullable=False)
    descripcion = Column(String(255), nullable=True)

    # Relationships
    usuarios = relationship("Usuario", back_populates="rol")


class Usuario(Base, TimestampMixin, StatusMixin):
    __tablename__ = "usuarios"

    id_usuario = Column(Integer, primary_key=True, autoincrement=True)
    correo_electronico = Column(String(150), unique=True, nullable=False)
    contrasena_hash = Column(String(255), nullable=False)
    nombre_completo = Column(String(150), nullable=False)
    id_rol = Column(Integer, ForeignKey("roles.id_rol"), nullable=False)
    estado = Column(String(20), nullable=False, default="activo")  # activo, inactivo

    # Relationships
    rol = relationship("Role", back_populates="usuarios")
