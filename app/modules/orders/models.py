from sqlalchemy import Column, Integer, String, ForeignKey, Numeric, Date, Text, UniqueConstraint
from sqlalchemy.orm import relationship
from decimal import Decimal

from app.database.database import Base
from app.common.mixins import TimestampMixin


class Pedido(Base, TimestampMixin):
    __tablename__ = "pedidos"

    id_pedido = Column(Integer, primary_key=True, autoincrement=True)

    # References
    id_cliente = Column(Integer, ForeignKey("clientes.id_cliente"), nullable=False, index=True)
    id_vendedor = Column(Integer, ForeignKey("usuarios.id_usuario"), nullable=False, index=True)
    id_usuario_creacion = Column(Integer, ForeignKey("usuarios.id_usuario"), nullable=True)

    # Order data
    tipo_pago = Column(String(20), nullable=False)  # contado, credito
    tipo_comprobante = Column(String(20), nullable=False)  # boleta, factura, guia
    estado_pedido = Column(String(30), nullable=False, default="pendiente")
    observaciones = Column(Text, nullable=True)

    # Totals (calculated)
    subtotal = Column(Numeric(12, 2), nullable=False, default=0)
    igv = Column(Numeric(12, 2), nullable=False, default=0)
    total = Column(Numeric(12, 2), nullable=False, default=0)

    # Relationships
    cliente = relationship("Cliente")
    vendedor = relationship("Usuario", foreign_keys=[id_vendedor])
    detalles = relationship("PedidoDetalle", back_populates="pedido", cascade="all, delete-orphan")
    pagos = relationship(
        "PedidoPago", back_populates="pedido", cascade="all, delete-orphan",
        order_by="PedidoPago.numero_cuota"
    )

    @property
    def monto_pagado(self) -> Decimal:
        """Suma de lo pagado en todas las cuotas"""
        return sum((Decimal(pago.monto_pagado or 0) for pago in self.pagos), Decimal("0.00"))

    @property
    def saldo_pendiente(self) -> Decimal:
        return Decimal(self.total or 0) - self.monto_pagado


class PedidoDetalle(Base):
    __tablename__ = "pedido_detalles"

    id_detalle = Column(Integer, primary_key=True, autoincrement=True)
    id_pedido = Column(Integer, ForeignKey("pedidos.id_pedido", ondelete="CASCADE"), nullable=False, index=True)
    id_producto = Column(Integer, ForeignKey("productos.id_producto"), nullable=False)

    cantidad = Column(Integer, nullable=False)
    precio_unitario = Column(Numeric(12, 4), nullable=False)
    subtotal = Column(Numeric(12, 2), nullable=False)  # cantidad * precio_unitario

    # Descuentos y comisiones: columnas previstas, siempre en cero
    descuento_porcentaje = Column(Numeric(5, 2), nullable=False, default=0)
    descuento_monto = Column(Numeric(12, 2), nullable=False, default=0)
    porcentaje_comision = Column(Numeric(5, 2), nullable=False, default=0)
    monto_comision = Column(Numeric(12, 2), nullable=False, default=0)

    # Relationships
    pedido = relationship("Pedido", back_populates="detalles")
    producto = relationship("Producto")


class PedidoPago(Base, TimestampMixin):
    """Cuota programada de un pedido a crédito"""
    __tablename__ = "pedido_pagos"

    id_pago = Column(Integer, primary_key=True, autoincrement=True)
    id_pedido = Column(Integer, ForeignKey("pedidos.id_pedido", ondelete="CASCADE"), nullable=False, index=True)

    numero_cuota = Column(Integer, nullable=False)
    monto_cuota = Column(Numeric(12, 2), nullable=False)
    monto_pagado = Column(Numeric(12, 2), nullable=False, default=0)
    saldo_pendiente = Column(Numeric(12, 2), nullable=False)
    fecha_pago_programada = Column(Date, nullable=False, index=True)
    fecha_pago_real = Column(Date, nullable=True)
    estado_pago = Column(String(20), nullable=False, default="pendiente")  # pendiente, pagado

    # Relationships
    pedido = relationship("Pedido", back_populates="pagos")

    __table_args__ = (
        UniqueConstraint("id_pedido", "numero_cuota", name="uq_pedido_pago_cuota"),
    )
