from sqlalchemy import Column, Integer, String, ForeignKey, Text
from sqlalchemy.orm import relationship

from app.database.database import Base
from app.common.mixins import TimestampMixin


class Devolucion(Base, TimestampMixin):
    __tablename__ = "devoluciones"

    id_devolucion = Column(Integer, primary_key=True, autoincrement=True)

    # References
    id_pedido = Column(Integer, ForeignKey("pedidos.id_pedido"), nullable=False, index=True)
    id_cliente = Column(Integer, ForeignKey("clientes.id_cliente"), nullable=False, index=True)
    id_vendedor = Column(Integer, ForeignKey("usuarios.id_usuario"), nullable=False)
    id_usuario_creacion = Column(Integer, ForeignKey("usuarios.id_usuario"), nullable=True)

    motivo = Column(Text, nullable=False)
    estado_devolucion = Column(String(30), nullable=False, default="pendiente")

    # Relationships
    pedido = relationship("Pedido")
    cliente = relationship("Cliente")
    vendedor = relationship("Usuario", foreign_keys=[id_vendedor])
    detalles = relationship("DevolucionDetalle", back_populates="devolucion", cascade="all, delete-orphan")


class DevolucionDetalle(Base):
    __tablename__ = "devolucion_detalles"

    id_detalle_devolucion = Column(Integer, primary_key=True, autoincrement=True)
    id_devolucion = Column(Integer, ForeignKey("devoluciones.id_devolucion", ondelete="CASCADE"), nullable=False, index=True)
    id_producto = Column(Integer, ForeignKey("productos.id_producto"), nullable=False)

    cantidad_devuelta = Column(Integer, nullable=False)
    motivo_producto = Column(Text, nullable=True)

    # Relationships
    devolucion = relationship("Devolucion", back_populates="detalles")
    producto = relationship("Producto")
