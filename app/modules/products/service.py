from sqlalchemy.orm import Session, selectinload
from sqlalchemy.exc import IntegrityError
from fastapi import HTTPException, status
from datetime import datetime, timezone
from typing import Dict, List
import logging

from app.modules.categories.models import CategoriaProducto
from app.modules.products.models import (
    Producto, ProductoImportacion, ProductoImagen, ProductoPorcentajeVenta
)
from app.modules.products.schemas import ProductCreate, ProductUpdate
from app.modules.providers.models import Proveedor

logger = logging.getLogger(__name__)


class ProductService:
    """Servicio para gestión de productos"""

    def __init__(self, db: Session):
        self.db = db

    def _ensure_category(self, category_id: int) -> None:
        if not self.db.get(CategoriaProducto, category_id):
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Categoría no encontrada"
            )

    def _code_taken(self, code: str, exclude_id: int = None) -> bool:
        query = self.db.query(Producto).filter(Producto.codigo_producto == code)
        if exclude_id is not None:
            query = query.filter(Producto.id_producto != exclude_id)
        return query.first() is not None

    def get_all_products(self) -> List[Producto]:
        return self.db.query(Producto).options(
            selectinload(Producto.categoria)
        ).order_by(Producto.id_producto.asc()).all()

    def get_product_by_id(self, product_id: int) -> Producto:
        product = self.db.query(Producto).options(
            selectinload(Producto.categoria),
            selectinload(Producto.porcentajes_venta),
            selectinload(Producto.importaciones),
            selectinload(Producto.imagenes),
        ).filter(Producto.id_producto == product_id).first()

        if not product:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Producto no encontrado"
            )
        return product

    def create_product(self, data: ProductCreate) -> Producto:
        """
        Crear producto junto con sus registros relacionados

        En el mismo commit se crean, si vienen en el cuerpo:
        - una importación, cuando llegan proveedor, precio de compra y stock
        - una imagen por imagen_ruta_archivo y una por cada entrada de imagenes
        - un porcentaje de venta, cuando llega precio_venta

        Si algo falla no queda ningún registro a medias.
        """
        if self._code_taken(data.codigo_producto):
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="El código de producto ya existe"
            )
        self._ensure_category(data.id_categoria)

        if data.has_import and not self.db.get(Proveedor, data.id_proveedor):
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Proveedor no encontrado"
            )

        try:
            product = Producto(
                codigo_producto=data.codigo_producto,
                descripcion=data.descripcion,
                id_categoria=data.id_categoria,
                estado=data.estado or Producto.ESTADO_ACTIVO
            )

            if data.has_import:
                product.importaciones.append(ProductoImportacion(
                    id_proveedor=data.id_proveedor,
                    fecha_importacion=data.fecha_importacion or datetime.now(timezone.utc),
                    precio_compra=data.precio_compra,
                    stock=data.stock,
                    estado_importacion="activa"
                ))

            order = 1
            if data.imagen_ruta_archivo:
                product.imagenes.append(ProductoImagen(
                    nombre_archivo=data.imagen_nombre_archivo or "",
                    ruta_archivo=data.imagen_ruta_archivo,
                    orden_visualizacion=order
                ))
                order += 1
            for image in data.imagenes:
                product.imagenes.append(ProductoImagen(
                    nombre_archivo=image.nombre_archivo or "",
                    ruta_archivo=image.ruta_archivo,
                    orden_visualizacion=order
                ))
                order += 1

            if data.precio_venta is not None:
                product.porcentajes_venta.append(ProductoPorcentajeVenta(
                    precio_venta=data.precio_venta,
                    porcentaje_margen=data.porcentaje_margen,
                    porcentaje_comision=data.porcentaje_comision
                ))

            self.db.add(product)
            self.db.commit()
            logger.info(
                f"Producto creado: {product.id_producto} ({product.codigo_producto}) "
                f"importaciones={len(product.importaciones)} imagenes={len(product.imagenes)}"
            )
            return self.get_product_by_id(product.id_producto)

        except IntegrityError:
            self.db.rollback()
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="El código de producto ya existe"
            )
        except Exception as e:
            self.db.rollback()
            logger.error(f"Error creando producto: {e}", exc_info=True)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Error al crear producto"
            )

    def update_product(self, product_id: int, data: ProductUpdate) -> Producto:
        """Actualizar los campos enviados del producto"""
        product = self.get_product_by_id(product_id)
        update_dict = data.model_dump(exclude_unset=True, exclude_none=True)

        code = update_dict.get("codigo_producto")
        if code and self._code_taken(code, exclude_id=product_id):
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="El código de producto ya existe"
            )
        if "id_categoria" in update_dict:
            self._ensure_category(update_dict["id_categoria"])

        try:
            for field, value in update_dict.items():
                setattr(product, field, value)
            self.db.commit()
            return self.get_product_by_id(product_id)

        except IntegrityError:
            self.db.rollback()
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="El código de producto ya existe"
            )
        except Exception as e:
            self.db.rollback()
            logger.error(f"Error actualizando producto {product_id}: {e}", exc_info=True)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Error al actualizar producto"
            )

    def delete_product(self, product_id: int) -> Dict[str, str]:
        """Eliminar producto; importaciones, imágenes y porcentajes se eliminan en cascada"""
        product = self.get_product_by_id(product_id)
        try:
            self.db.delete(product)
            self.db.commit()
            return {"message": "Producto eliminado"}

        except IntegrityError:
            self.db.rollback()
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="No se puede eliminar un producto con pedidos o devoluciones asociados"
            )
        except Exception as e:
            self.db.rollback()
            logger.error(f"Error eliminando producto {product_id}: {e}", exc_info=True)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Error al eliminar producto"
            )
