from sqlalchemy.orm import Session, selectinload
from sqlalchemy.exc import IntegrityError
from fastapi import HTTPException, status
from typing import Dict, List
import logging

from app.modules.clients.models import Cliente
from app.modules.orders.models import Pedido
from app.modules.products.models import Producto
from app.modules.returns.models import Devolucion, DevolucionDetalle
from app.modules.returns.schemas import ReturnCreate, ReturnUpdate
from app.modules.users.models import Usuario

logger = logging.getLogger(__name__)


class ReturnService:
    """Servicio para devoluciones de pedidos"""

    def __init__(self, db: Session):
        self.db = db

    def _validate_references(self, data: ReturnCreate) -> None:
        """Pedido, cliente, vendedor y productos deben existir antes de escribir"""
        for model, key, message in (
            (Pedido, data.id_pedido, "Pedido no encontrado"),
            (Cliente, data.id_cliente, "Cliente no encontrado"),
            (Usuario, data.id_vendedor, "Vendedor no encontrado"),
        ):
            if not self.db.get(model, key):
                raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=message)

        product_ids = {item.id_producto for item in data.detalles}
        if not product_ids:
            return
        found = {
            row.id_producto for row in
            self.db.query(Producto.id_producto).filter(Producto.id_producto.in_(product_ids)).all()
        }
        missing = sorted(product_ids - found)
        if missing:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Producto no encontrado: {', '.join(str(pid) for pid in missing)}"
            )

    def get_returns(self) -> List[Devolucion]:
        return self.db.query(Devolucion).options(
            selectinload(Devolucion.cliente),
            selectinload(Devolucion.vendedor),
            selectinload(Devolucion.pedido)
        ).order_by(Devolucion.id_devolucion.desc()).all()

    def get_return_by_id(self, return_id: int) -> Devolucion:
        devolucion = self.db.query(Devolucion).options(
            selectinload(Devolucion.cliente),
            selectinload(Devolucion.vendedor),
            selectinload(Devolucion.pedido),
            selectinload(Devolucion.detalles).selectinload(DevolucionDetalle.producto)
        ).filter(Devolucion.id_devolucion == return_id).first()

        if not devolucion:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Devolución no encontrada"
            )
        return devolucion

    def create_return(self, data: ReturnCreate) -> Devolucion:
        """
        Registrar devolución con sus líneas

        Pedido, cliente, vendedor y productos referenciados deben existir;
        cabecera y detalle se guardan en un único commit.
        """
        self._validate_references(data)

        try:
            devolucion = Devolucion(
                id_pedido=data.id_pedido,
                id_cliente=data.id_cliente,
                id_vendedor=data.id_vendedor,
                motivo=data.motivo,
                estado_devolucion=data.estado_devolucion or "pendiente",
                id_usuario_creacion=data.id_vendedor
            )
            for item in data.detalles:
                devolucion.detalles.append(DevolucionDetalle(**item.model_dump()))

            self.db.add(devolucion)
            self.db.commit()
            logger.info(
                f"Devolución {devolucion.id_devolucion} registrada para pedido {data.id_pedido} "
                f"({len(data.detalles)} líneas)"
            )
            return self.get_return_by_id(devolucion.id_devolucion)

        except IntegrityError as e:
            self.db.rollback()
            logger.warning(f"Conflicto de integridad registrando devolución: {e}")
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="Conflicto de integridad al registrar devolución"
            )
        except Exception as e:
            self.db.rollback()
            logger.error(f"Error registrando devolución: {e}", exc_info=True)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Error al registrar devolución"
            )

    def update_return(self, return_id: int, data: ReturnUpdate) -> Devolucion:
        devolucion = self.get_return_by_id(return_id)
        try:
            for field, value in data.model_dump(exclude_unset=True, exclude_none=True).items():
                setattr(devolucion, field, value)
            self.db.commit()
            return self.get_return_by_id(return_id)
        except Exception as e:
            self.db.rollback()
            logger.error(f"Error actualizando devolución {return_id}: {e}", exc_info=True)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Error al actualizar devolución"
            )

    def delete_return(self, return_id: int) -> Dict[str, str]:
        devolucion = self.get_return_by_id(return_id)
        try:
            self.db.delete(devolucion)
            self.db.commit()
            return {"message": "Devolución eliminada"}
        except Exception as e:
            self.db.rollback()
            logger.error(f"Error eliminando devolución {return_id}: {e}", exc_info=True)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Error al eliminar devolución"
            )
