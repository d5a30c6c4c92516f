from sqlalchemy import Column, Integer, String, ForeignKey, Numeric
from sqlalchemy.orm import relationship

from app.database.database import Base
from app.common.mixins import TimestampMixin

class CategoriaProducto(Base, TimestampMixin):
    __tablename__ = "categorias_producto"

    id_categoria = Column(Integer, primary_key=True, autoincrement=True)
    nombre_categoria = Column(String(100), unique=True, nullable=False)
    id_categoria_padre = Column(Integer, ForeignKey("categorias_producto.id_categoria"), nullable=True)
    porcentaje_alerta_stock = Column(Numeric(5, 2), nullable=False, default=10)
    descripcion = Column(String(255), nullable=True)

    # Relationships
    padre = relationship("CategoriaProducto", remote_side=[id_categoria], back_populates="subcategorias")
    subcategorias = relationship("CategoriaProducto", back_populates="padre", order_by="CategoriaProducto.nombre_categoria")
    productos = relationship("Producto", back_populates="categoria")
