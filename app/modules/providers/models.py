from sqlalchemy import Column, Integer, String

from app.database.database import Base
from app.common.mixins import TimestampMixin, StatusMixin


class Proveedor(Base, TimestampMixin, StatusMixin):
    __tablename__ = "proveedores"

    id_proveedor = Column(Integer, primary_key=True, autoincrement=True)
    nombre_proveedor = Column(String(200), nullable=False)
    ruc = Column(String(11), nullable=True)
    telefono = Column(String(20), nullable=True)
    correo_electronico = Column(String(150), nullable=True)
    estado = Column(String(20), nullable=False, default="activo")
