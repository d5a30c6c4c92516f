from fastapi import APIRouter, status, Depends
from sqlalchemy.orm import Session
from typing import List

from app.database.database import get_db
from app.modules.products.service import ProductService
from app.modules.products.schemas import ProductCreate, ProductUpdate, ProductOut, ProductDetail

product_router = APIRouter(tags=["Products"])


@product_router.get("", response_model=List[ProductOut])
def list_products(db: Session = Depends(get_db)):
    """Productos con su categoría, sin importaciones ni imágenes"""
    product_service = ProductService(db)
    return product_service.get_all_products()


@product_router.post("", response_model=ProductDetail, status_code=status.HTTP_201_CREATED)
def create_product(data: ProductCreate, db: Session = Depends(get_db)):
    """
    Crear producto.

    - **codigo_producto**, **descripcion**, **id_categoria**: obligatorios
    - **id_proveedor**, **precio_compra**, **stock**: registran la importación inicial
    - **imagen_ruta_archivo** / **imagenes**: registran imágenes
    - **precio_venta**, **porcentaje_margen**, **porcentaje_comision**: precio de venta
    """
    product_service = ProductService(db)
    return product_service.create_product(data)


@product_router.get("/{product_id}", response_model=ProductDetail)
def get_product(product_id: int, db: Session = Depends(get_db)):
    product_service = ProductService(db)
    return product_service.get_product_by_id(product_id)


@product_router.put("/{product_id}", response_model=ProductDetail)
def update_product(product_id: int, data: ProductUpdate, db: Session = Depends(get_db)):
    product_service = ProductService(db)
    return product_service.update_product(product_id, data)


@product_router.delete("/{product_id}")
def delete_product(product_id: int, db: Session = Depends(get_db)):
    product_service = ProductService(db)
    return product_service.delete_product(product_id)
