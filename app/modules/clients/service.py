from sqlalchemy import func
from sqlalchemy.orm import Session, selectinload
from sqlalchemy.exc import IntegrityError
from fastapi import HTTPException, status
from typing import Dict, List, Any
import logging

from app.modules.clients.models import Cliente
from app.modules.clients.schemas import ClientCreate, ClientUpdate
from app.modules.users.models import Usuario

logger = logging.getLogger(__name__)


class ClientService:
    """Servicio para gestión de clientes"""

    def __init__(self, db: Session):
        self.db = db

    def _email_taken(self, email: str, exclude_id: int = None) -> bool:
        query = self.db.query(Cliente).filter(func.lower(Cliente.correo_electronico) == email.lower())
        if exclude_id is not None:
            query = query.filter(Cliente.id_cliente != exclude_id)
        return query.first() is not None

    def _ensure_seller(self, seller_id: int) -> None:
        if not self.db.get(Usuario, seller_id):
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Vendedor no encontrado"
            )

    def get_active_clients(self) -> List[Cliente]:
        """Clientes activos ordenados por razón social"""
        return self.db.query(Cliente).options(
            selectinload(Cliente.vendedor)
        ).filter(
            Cliente.estado == Cliente.ESTADO_ACTIVO
        ).order_by(Cliente.razon_social.asc()).all()

    def get_client_by_id(self, client_id: int) -> Cliente:
        client = self.db.query(Cliente).options(
            selectinload(Cliente.vendedor)
        ).filter(Cliente.id_cliente == client_id).first()

        if not client:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Cliente no encontrado"
            )
        return client

    def create_client(self, data: ClientCreate) -> Cliente:
        """
        Crear nuevo cliente

        Args:
            data: Datos del cliente; razón social, correo y vendedor asignado son obligatorios

        Returns:
            Cliente: Cliente creado (estado 'activo' por defecto)
        """
        if self._email_taken(data.correo_electronico):
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="El correo del cliente ya existe"
            )
        self._ensure_seller(data.id_vendedor_asignado)

        try:
            values: Dict[str, Any] = data.model_dump()
            values["estado"] = values.get("estado") or Cliente.ESTADO_ACTIVO
            values["nombre_completo"] = values.get("nombre_completo") or data.razon_social

            client = Cliente(**values)
            self.db.add(client)
            self.db.commit()
            self.db.refresh(client)
            logger.info(f"Cliente creado: {client.id_cliente} ({client.razon_social})")
            return client

        except IntegrityError:
            self.db.rollback()
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="El correo del cliente ya existe"
            )
        except Exception as e:
            self.db.rollback()
            logger.error(f"Error creando cliente: {e}", exc_info=True)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Error al crear cliente"
            )

    def update_client(self, client_id: int, data: ClientUpdate) -> Cliente:
        """Actualizar cliente"""
        client = self.get_client_by_id(client_id)
        update_dict = data.model_dump(exclude_unset=True)

        email = update_dict.get("correo_electronico")
        if email and self._email_taken(email, exclude_id=client_id):
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="El correo del cliente ya existe"
            )
        if update_dict.get("id_vendedor_asignado"):
            self._ensure_seller(update_dict["id_vendedor_asignado"])

        estado = update_dict.pop("estado", None)
        new_name = update_dict.get("razon_social")
        # nombre_completo heredado de la razón social se renombra con ella
        if new_name and "nombre_completo" not in update_dict and client.nombre_completo == client.razon_social:
            update_dict["nombre_completo"] = new_name

        try:
            for field, value in update_dict.items():
                if value is None and field in ("razon_social", "correo_electronico", "id_vendedor_asignado"):
                    continue
                setattr(client, field, value)
            if estado == Cliente.ESTADO_ACTIVO:
                client.enable()
            elif estado == Cliente.ESTADO_INACTIVO:
                client.disable()
            self.db.commit()
            self.db.refresh(client)
            return client

        except IntegrityError:
            self.db.rollback()
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="El correo del cliente ya existe"
            )
        except Exception as e:
            self.db.rollback()
            logger.error(f"Error actualizando cliente {client_id}: {e}", exc_info=True)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Error al actualizar cliente"
            )

    def disable_client(self, client_id: int) -> Dict[str, str]:
        """Desactivar cliente; sus pedidos históricos se conservan"""
        client = self.get_client_by_id(client_id)
        try:
            client.disable()
            self.db.commit()
            return {"message": "Cliente desactivado"}
        except Exception as e:
            self.db.rollback()
            logger.error(f"Error desactivando cliente {client_id}: {e}", exc_info=True)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Error al desactivar cliente"
            )
