from sqlalchemy.orm import Session
from fastapi import HTTPException, status
from typing import List
import logging

from app.modules.providers.models import Proveedor
from app.modules.providers.schemas import ProviderCreate

logger = logging.getLogger(__name__)


class ProviderService:
    """Servicio para proveedores"""

    def __init__(self, db: Session):
        self.db = db

    def get_active_providers(self) -> List[Proveedor]:
        """Proveedores activos ordenados por nombre"""
        return self.db.query(Proveedor).filter(
            Proveedor.estado == Proveedor.ESTADO_ACTIVO
        ).order_by(Proveedor.nombre_proveedor.asc()).all()

    def create_provider(self, data: ProviderCreate) -> Proveedor:
        try:
            provider = Proveedor(**data.model_dump(), estado=Proveedor.ESTADO_ACTIVO)
            self.db.add(provider)
            self.db.commit()
            self.db.refresh(provider)
            return provider
        except Exception as e:
            self.db.rollback()
            logger.error(f"Error creando proveedor: {e}", exc_info=True)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Error al crear proveedor"
            )
