from sqlalchemy import func
from sqlalchemy.orm import Session, selectinload
from sqlalchemy.exc import IntegrityError
from fastapi import HTTPException, status
from typing import Dict, List, Any
import logging

from app.modules.finances.models import CategoriaFinanciera, MovimientoFinanciero
from app.modules.finances.schemas import (
    FinanceCategoryCreate, FinanceCategoryUpdate, MovementCreate, MovementUpdate
)
from app.modules.orders.calculator import to_money
from app.modules.users.models import Usuario

logger = logging.getLogger(__name__)


class FinanceService:
    """Servicio para movimientos financieros y sus categorías"""

    def __init__(self, db: Session):
        self.db = db

    # ===== CATEGORÍAS =====

    def _category_name_taken(self, name: str, exclude_id: int = None) -> bool:
        query = self.db.query(CategoriaFinanciera).filter(
            func.lower(CategoriaFinanciera.nombre_categoria) == name.lower()
        )
        if exclude_id is not None:
            query = query.filter(CategoriaFinanciera.id_categoria_financiera != exclude_id)
        return query.first() is not None

    def get_categories(self) -> List[CategoriaFinanciera]:
        return self.db.query(CategoriaFinanciera).order_by(
            CategoriaFinanciera.id_categoria_financiera.asc()
        ).all()

    def get_category_by_id(self, category_id: int) -> CategoriaFinanciera:
        category = self.db.get(CategoriaFinanciera, category_id)
        if not category:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Categoría financiera no encontrada"
            )
        return category

    def create_category(self, data: FinanceCategoryCreate) -> CategoriaFinanciera:
        if self._category_name_taken(data.nombre_categoria):
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="La categoría financiera ya existe"
            )
        try:
            category = CategoriaFinanciera(**data.model_dump())
            self.db.add(category)
            self.db.commit()
            self.db.refresh(category)
            return category
        except IntegrityError:
            self.db.rollback()
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="La categoría financiera ya existe"
            )
        except Exception as e:
            self.db.rollback()
            logger.error(f"Error creando categoría financiera: {e}", exc_info=True)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Error al crear categoría financiera"
            )

    def update_category(self, category_id: int, data: FinanceCategoryUpdate) -> CategoriaFinanciera:
        category = self.get_category_by_id(category_id)
        update_dict = data.model_dump(exclude_unset=True, exclude_none=True)

        name = update_dict.get("nombre_categoria")
        if name and self._category_name_taken(name, exclude_id=category_id):
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="La categoría financiera ya existe"
            )
        try:
            for field, value in update_dict.items():
                setattr(category, field, value)
            self.db.commit()
            self.db.refresh(category)
            return category
        except Exception as e:
            self.db.rollback()
            logger.error(f"Error actualizando categoría financiera {category_id}: {e}", exc_info=True)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Error al actualizar categoría financiera"
            )

    def delete_category(self, category_id: int) -> Dict[str, str]:
        """
        Eliminar categoría financiera

        Se rechaza con 409 mientras algún movimiento la referencie; en ese
        caso la categoría queda intacta.
        """
        category = self.get_category_by_id(category_id)

        in_use = self.db.query(func.count(MovimientoFinanciero.id_movimiento)).filter(
            MovimientoFinanciero.id_categoria_financiera == category_id
        ).scalar()
        if in_use:
            logger.warning(f"Categoría financiera {category_id} tiene {in_use} movimientos; no se elimina")
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="No se puede eliminar una categoría con registros asociados"
            )

        try:
            self.db.delete(category)
            self.db.commit()
            return {"message": "Categoría eliminada"}
        except IntegrityError:
            self.db.rollback()
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="No se puede eliminar una categoría con registros asociados"
            )
        except Exception as e:
            self.db.rollback()
            logger.error(f"Error eliminando categoría financiera {category_id}: {e}", exc_info=True)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Error al eliminar categoría financiera"
            )

    # ===== MOVIMIENTOS =====

    def _validate_movement_refs(self, values: Dict[str, Any]) -> None:
        if values.get("id_categoria_financiera"):
            self.get_category_by_id(values["id_categoria_financiera"])
        if values.get("id_usuario_registro") and not self.db.get(Usuario, values["id_usuario_registro"]):
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Usuario no encontrado"
            )

    def get_movements(self) -> List[MovimientoFinanciero]:
        """Movimientos del más reciente al más antiguo, con categoría y usuario"""
        return self.db.query(MovimientoFinanciero).options(
            selectinload(MovimientoFinanciero.categoria),
            selectinload(MovimientoFinanciero.usuario)
        ).order_by(
            MovimientoFinanciero.fecha_movimiento.desc(),
            MovimientoFinanciero.id_movimiento.desc()
        ).all()

    def get_movement_by_id(self, movement_id: int) -> MovimientoFinanciero:
        movement = self.db.query(MovimientoFinanciero).options(
            selectinload(MovimientoFinanciero.categoria),
            selectinload(MovimientoFinanciero.usuario)
        ).filter(MovimientoFinanciero.id_movimiento == movement_id).first()

        if not movement:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Movimiento no encontrado"
            )
        return movement

    def create_movement(self, data: MovementCreate) -> MovimientoFinanciero:
        values = data.model_dump()
        self._validate_movement_refs(values)

        try:
            values["monto"] = to_money(values["monto"])
            movement = MovimientoFinanciero(**values, estado_computo=MovimientoFinanciero.COMPUTADO)
            self.db.add(movement)
            self.db.commit()
            logger.info(
                f"Movimiento {movement.id_movimiento} registrado: {movement.tipo_movimiento} {movement.monto}"
            )
            return self.get_movement_by_id(movement.id_movimiento)
        except Exception as e:
            self.db.rollback()
            logger.error(f"Error registrando movimiento: {e}", exc_info=True)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Error al registrar movimiento"
            )

    def update_movement(self, movement_id: int, data: MovementUpdate) -> MovimientoFinanciero:
        movement = self.get_movement_by_id(movement_id)
        update_dict = data.model_dump(exclude_unset=True, exclude_none=True)
        self._validate_movement_refs(update_dict)

        try:
            if "monto" in update_dict:
                update_dict["monto"] = to_money(update_dict["monto"])
            for field, value in update_dict.items():
                setattr(movement, field, value)
            self.db.commit()
            return self.get_movement_by_id(movement_id)
        except Exception as e:
            self.db.rollback()
            logger.error(f"Error actualizando movimiento {movement_id}: {e}", exc_info=True)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Error al actualizar movimiento"
            )

    def void_movement(self, movement_id: int) -> Dict[str, Any]:
        """Baja lógica: el movimiento queda como 'no_computado'"""
        movement = self.get_movement_by_id(movement_id)
        try:
            movement.estado_computo = MovimientoFinanciero.NO_COMPUTADO
            self.db.commit()
            logger.info(f"Movimiento {movement_id} marcado como no computado")
            return {
                "message": "Movimiento marcado como no computado",
                "updated": self.get_movement_by_id(movement_id)
            }
        except Exception as e:
            self.db.rollback()
            logger.error(f"Error anulando movimiento {movement_id}: {e}", exc_info=True)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Error al anular movimiento"
            )
