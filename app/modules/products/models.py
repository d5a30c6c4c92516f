from sqlalchemy import Column, Integer, String, ForeignKey, Numeric, DateTime, Text
from sqlalchemy.orm import relationship
from datetime import datetime, timezone

from app.database.database import Base
from app.common.mixins import TimestampMixin, StatusMixin


class Producto(Base, TimestampMixin, StatusMixin):
    __tablename__ = "productos"

    id_producto = Column(Integer, primary_key=True, autoincrement=True)
    codigo_producto = Column(String(50), unique=True, nullable=False)
    descripcion = Column(Text, nullable=False)
    id_categoria = Column(Integer, ForeignKey("categorias_producto.id_categoria"), nullable=False, index=True)
    estado = Column(String(20), nullable=False, default="activo")

    # Relationships
    categoria = relationship("CategoriaProducto", back_populates="productos")
    importaciones = relationship("ProductoImportacion", back_populates="producto", cascade="all, delete-orphan")
    imagenes = relationship(
        "ProductoImagen", back_populates="producto", cascade="all, delete-orphan",
        order_by="ProductoImagen.orden_visualizacion"
    )
    porcentajes_venta = relationship("ProductoPorcentajeVenta", back_populates="producto", cascade="all, delete-orphan")


class ProductoImportacion(Base, TimestampMixin):
    """Lote importado de un producto con su precio de compra y stock"""
    __tablename__ = "producto_importaciones"

    id_importacion = Column(Integer, primary_key=True, autoincrement=True)
    id_producto = Column(Integer, ForeignKey("productos.id_producto", ondelete="CASCADE"), nullable=False, index=True)
    id_proveedor = Column(Integer, ForeignKey("proveedores.id_proveedor"), nullable=False)
    fecha_importacion = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))
    precio_compra = Column(Numeric(12, 2), nullable=False)
    stock = Column(Integer, nullable=False, default=0)
    estado_importacion = Column(String(20), nullable=False, default="activa")

    # Relationships
    producto = relationship("Producto", back_populates="importaciones")
    proveedor = relationship("Proveedor")


class ProductoImagen(Base, TimestampMixin):
    __tablename__ = "producto_imagenes"

    id_imagen = Column(Integer, primary_key=True, autoincrement=True)
    id_producto = Column(Integer, ForeignKey("productos.id_producto", ondelete="CASCADE"), nullable=False, index=True)
    nombre_archivo = Column(String(255), nullable=False, default="")
    ruta_archivo = Column(String(500), nullable=False)
    orden_visualizacion = Column(Integer, nullable=False, default=1)

    # Relationships
    producto = relationship("Producto", back_populates="imagenes")


class ProductoPorcentajeVenta(Base, TimestampMixin):
    __tablename__ = "producto_porcentajes_venta"

    id_porcentaje = Column(Integer, primary_key=True, autoincrement=True)
    id_producto = Column(Integer, ForeignKey("productos.id_producto", ondelete="CASCADE"), nullable=False, index=True)
    precio_venta = Column(Numeric(12, 2), nullable=False)
    porcentaje_margen = Column(Numeric(5, 2), nullable=True)
    porcentaje_comision = Column(Numeric(5, 2), nullable=True)

    # Relationships
    producto = relationship("Producto", back_populates="porcentajes_venta")
