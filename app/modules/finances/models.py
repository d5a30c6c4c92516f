from sqlalchemy import Column, Integer, String, ForeignKey, Numeric, Date, Text
from sqlalchemy.orm import relationship

from app.database.database import Base
from app.common.mixins import TimestampMixin


class CategoriaFinanciera(Base, TimestampMixin):
    __tablename__ = "categorias_financieras"

    id_categoria_financiera = Column(Integer, primary_key=True, autoincrement=True)
    nombre_categoria = Column(String(100), unique=True, nullable=False)
    tipo_categoria = Column(String(20), nullable=False)  # ingreso, egreso
    descripcion = Column(Text, nullable=True)

    # Relationships
    movimientos = relationship("MovimientoFinanciero", back_populates="categoria")


class MovimientoFinanciero(Base, TimestampMixin):
    """Ingreso o egreso del libro de caja"""
    __tablename__ = "movimientos_financieros"

    COMPUTADO = "computado"
    NO_COMPUTADO = "no_computado"

    id_movimiento = Column(Integer, primary_key=True, autoincrement=True)
    tipo_movimiento = Column(String(20), nullable=False)  # ingreso, egreso
    id_categoria_financiera = Column(
        Integer, ForeignKey("categorias_financieras.id_categoria_financiera"), nullable=True, index=True
    )

    razon = Column(String(255), nullable=False)
    monto = Column(Numeric(12, 2), nullable=False)
    fecha_movimiento = Column(Date, nullable=False, index=True)
    numero_comprobante = Column(String(50), nullable=True)
    numero_operacion_bancaria = Column(String(50), nullable=True)
    descripcion = Column(Text, nullable=True)

    id_usuario_registro = Column(Integer, ForeignKey("usuarios.id_usuario"), nullable=False)
    estado_computo = Column(String(20), nullable=False, default=COMPUTADO)

    # Relationships
    categoria = relationship("CategoriaFinanciera", back_populates="movimientos")
    usuario = relationship("Usuario")
