from pydantic import BaseModel, Field
from typing import Optional, List
from decimal import Decimal

class CategoryCreate(BaseModel):
    nombre_categoria: str = Field(..., min_length=1, max_length=100)
    id_categoria_padre: Optional[int] = Field(None, gt=0)
    porcentaje_alerta_stock: Optional[Decimal] = Field(None, ge=0, le=100)
    descripcion: Optional[str] = Field(None, max_length=255)

class CategoryOut(BaseModel):
    id_categoria: int
    nombre_categoria: str
    id_categoria_padre: Optional[int] = None
    porcentaje_alerta_stock: Decimal
    descripcion: Optional[str] = None

    class Config:
        from_attributes = True

class CategoryTree(CategoryOut):
    subcategorias: List[CategoryOut] = []
