from sqlalchemy import Column, Integer, String, Date, ForeignKey, Text
from sqlalchemy.orm import relationship

from app.database.database import Base
from app.common.mixins import TimestampMixin, StatusMixin


class Cliente(Base, TimestampMixin, StatusMixin):
    __tablename__ = "clientes"

    id_cliente = Column(Integer, primary_key=True, autoincrement=True)
    id_vendedor_asignado = Column(Integer, ForeignKey("usuarios.id_usuario"), nullable=False, index=True)

    # Datos de la empresa cliente
    ruc = Column(String(11), nullable=True)
    razon_social = Column(String(200), nullable=False)
    nombre_completo = Column(String(200), nullable=True)  # Nombre comercial; por defecto la razón social
    tipo_cliente = Column(String(20), nullable=True)  # regular, vip

    # Representante
    nombre_representante = Column(String(150), nullable=True)
    dni_representante = Column(String(8), nullable=True)
    cumpleanos_representante = Column(Date, nullable=True)

    # Contacto
    correo_electronico = Column(String(150), unique=True, nullable=False)
    telefono_principal = Column(String(20), nullable=True)
    telefono_secundario = Column(String(20), nullable=True)

    # Ubicación
    departamento = Column(String(100), nullable=True)
    provincia = Column(String(100), nullable=True)
    distrito = Column(String(100), nullable=True)
    direccion = Column(Text, nullable=True)

    estado = Column(String(20), nullable=False, default="activo")

    # Relationships
    vendedor = relationship("Usuario")
