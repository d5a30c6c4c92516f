from sqlalchemy.orm import Session, selectinload
from sqlalchemy.exc import IntegrityError
from fastapi import HTTPException, status
from typing import List
import logging

from app.modules.categories.models import CategoriaProducto
from app.modules.categories.schemas import CategoryCreate

logger = logging.getLogger(__name__)

DEFAULT_STOCK_ALERT_PERCENTAGE = 10


class CategoryService:
    """Servicio para gestión de categorías de producto"""

    def __init__(self, db: Session):
        self.db = db

    def create_category(self, data: CategoryCreate) -> CategoriaProducto:
        """
        Crear nueva categoría

        Args:
            data: Datos de la categoría; si trae id_categoria_padre se crea como subcategoría

        Returns:
            CategoriaProducto: Categoría creada
        """
        existing = self.db.query(CategoriaProducto).filter(
            CategoriaProducto.nombre_categoria == data.nombre_categoria
        ).first()

        if existing:
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="La categoría ya existe"
            )

        if data.id_categoria_padre is not None and not self.db.get(CategoriaProducto, data.id_categoria_padre):
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Categoría padre no encontrada"
            )

        try:
            category = CategoriaProducto(
                nombre_categoria=data.nombre_categoria,
                id_categoria_padre=data.id_categoria_padre,
                porcentaje_alerta_stock=(
                    data.porcentaje_alerta_stock
                    if data.porcentaje_alerta_stock is not None
                    else DEFAULT_STOCK_ALERT_PERCENTAGE
                ),
                descripcion=data.descripcion
            )

            self.db.add(category)
            self.db.commit()
            self.db.refresh(category)
            return category

        except IntegrityError:
            self.db.rollback()
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="La categoría ya existe"
            )
        except Exception as e:
            self.db.rollback()
            logger.error(f"Error creando categoría: {e}", exc_info=True)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Error al crear categoría"
            )

    def get_root_categories(self) -> List[CategoriaProducto]:
        """Categorías raíz con sus subcategorías, ordenadas por nombre"""
        return self.db.query(CategoriaProducto).options(
            selectinload(CategoriaProducto.subcategorias)
        ).filter(
            CategoriaProducto.id_categoria_padre.is_(None)
        ).order_by(CategoriaProducto.nombre_categoria.asc()).all()

    def get_category_by_id(self, category_id: int) -> CategoriaProducto:
        """Obtener categoría por ID"""
        category = self.db.get(CategoriaProducto, category_id)

        if not category:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Categoría no encontrada"
            )
        return category
