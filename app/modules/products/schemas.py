from pydantic import BaseModel, Field
from typing import Optional, List
from decimal import Decimal
from datetime import datetime

from app.modules.categories.schemas import CategoryOut


class ProductImageIn(BaseModel):
    ruta_archivo: str = Field(..., min_length=1, max_length=500)
    nombre_archivo: Optional[str] = Field(None, max_length=255)


class ProductCreate(BaseModel):
    codigo_producto: str = Field(..., min_length=1, max_length=50)
    descripcion: str = Field(..., min_length=1)
    id_categoria: int = Field(..., gt=0)
    estado: Optional[str] = None

    # Importación inicial
    id_proveedor: Optional[int] = Field(None, gt=0)
    precio_compra: Optional[Decimal] = Field(None, gt=0)
    stock: Optional[int] = Field(None, ge=0)
    fecha_importacion: Optional[datetime] = None

    # Imagen principal y adicionales
    imagen_nombre_archivo: Optional[str] = Field(None, max_length=255)
    imagen_ruta_archivo: Optional[str] = Field(None, max_length=500)
    imagenes: List[ProductImageIn] = []

    # Precio de venta
    precio_venta: Optional[Decimal] = Field(None, gt=0)
    porcentaje_margen: Optional[Decimal] = Field(None, ge=0)
    porcentaje_comision: Optional[Decimal] = Field(None, ge=0, le=100)

    @property
    def has_import(self) -> bool:
        return self.id_proveedor is not None and self.precio_compra is not None and self.stock is not None


class ProductUpdate(BaseModel):
    codigo_producto: Optional[str] = Field(None, min_length=1, max_length=50)
    descripcion: Optional[str] = Field(None, min_length=1)
    id_categoria: Optional[int] = Field(None, gt=0)
    estado: Optional[str] = None


class ProductImportOut(BaseModel):
    id_importacion: int
    id_proveedor: int
    fecha_importacion: datetime
    precio_compra: Decimal
    stock: int
    estado_importacion: str

    class Config:
        from_attributes = True


class ProductImageOut(BaseModel):
    id_imagen: int
    nombre_archivo: str
    ruta_archivo: str
    orden_visualizacion: int

    class Config:
        from_attributes = True


class ProductSalePercentageOut(BaseModel):
    id_porcentaje: int
    precio_venta: Decimal
    porcentaje_margen: Optional[Decimal] = None
    porcentaje_comision: Optional[Decimal] = None

    class Config:
        from_attributes = True


class ProductSummary(BaseModel):
    id_producto: int
    codigo_producto: str
    descripcion: str

    class Config:
        from_attributes = True


class ProductOut(ProductSummary):
    id_categoria: int
    estado: str
    categoria: Optional[CategoryOut] = None
    fecha_creacion: Optional[datetime] = None


class ProductDetail(ProductOut):
    porcentajes_venta: List[ProductSalePercentageOut] = []
    importaciones: List[ProductImportOut] = []
    imagenes: List[ProductImageOut] = []
