from sqlalchemy import update
from sqlalchemy.orm import Session, selectinload
from fastapi import HTTPException, status
from datetime import datetime, timezone
from typing import Dict, List, Optional, Any
import logging

from app.modules.notifications.models import Notificacion, NotificacionUsuario
from app.modules.notifications.schemas import NotificationCreate
from app.modules.users.models import Usuario

logger = logging.getLogger(__name__)


class NotificationService:
    """Servicio de notificaciones y su estado de lectura por usuario"""

    def __init__(self, db: Session):
        self.db = db

    def get_notifications(self) -> List[Notificacion]:
        return self.db.query(Notificacion).options(
            selectinload(Notificacion.destinatarios)
        ).order_by(Notificacion.id_notificacion.desc()).all()

    def create_notification(self, data: NotificationCreate) -> Notificacion:
        """
        Crear notificación y una fila de lectura por destinatario

        Args:
            data: tipo, detalle y lista de usuarios (sin repetidos)

        Returns:
            Notificacion: enviada, con fecha de envío actual
        """
        found = {
            row.id_usuario for row in
            self.db.query(Usuario.id_usuario).filter(Usuario.id_usuario.in_(data.usuarios)).all()
        }
        missing = [uid for uid in data.usuarios if uid not in found]
        if missing:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Usuario no encontrado: {', '.join(str(uid) for uid in missing)}"
            )

        try:
            notification = Notificacion(
                tipo_notificacion=data.tipo_notificacion,
                detalle=data.detalle,
                enviada=True,
                fecha_envio=datetime.now(timezone.utc)
            )
            for user_id in data.usuarios:
                notification.destinatarios.append(NotificacionUsuario(id_usuario=user_id, leida=False))

            self.db.add(notification)
            self.db.commit()
            self.db.refresh(notification)
            logger.info(
                f"Notificación {notification.id_notificacion} enviada a {len(data.usuarios)} usuarios"
            )
            return notification

        except Exception as e:
            self.db.rollback()
            logger.error(f"Error creando notificación: {e}", exc_info=True)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Error al crear notificación"
            )

    def get_user_notifications(self, user_id: int, leida: Optional[bool] = None) -> List[Dict[str, Any]]:
        query = self.db.query(NotificacionUsuario).options(
            selectinload(NotificacionUsuario.notificacion)
        ).filter(NotificacionUsuario.id_usuario == user_id)

        if leida is not None:
            query = query.filter(NotificacionUsuario.leida == leida)

        rows = query.order_by(NotificacionUsuario.id_notificacion.desc()).all()
        return [
            {
                "id_notificacion_usuario": row.id_notificacion_usuario,
                "id_notificacion": row.id_notificacion,
                "tipo_notificacion": row.notificacion.tipo_notificacion,
                "detalle": row.notificacion.detalle,
                "fecha_envio": row.notificacion.fecha_envio,
                "leida": row.leida,
                "fecha_lectura": row.fecha_lectura,
            }
            for row in rows
        ]

    def mark_as_read(self, user_id: int, notification_id: int) -> Dict[str, Any]:
        """
        Marcar como leída la notificación de un usuario

        Update condicional sobre el par (notificación, usuario). Repetirlo
        solo vuelve a escribir la fecha de lectura.
        """
        now = datetime.now(timezone.utc)
        try:
            result = self.db.execute(
                update(NotificacionUsuario)
                .where(
                    NotificacionUsuario.id_notificacion == notification_id,
                    NotificacionUsuario.id_usuario == user_id
                )
                .values(leida=True, fecha_lectura=now)
            )
            if result.rowcount == 0:
                self.db.rollback()
                raise HTTPException(
                    status_code=status.HTTP_404_NOT_FOUND,
                    detail="Notificación no asociada al usuario"
                )
            self.db.commit()
            return {
                "message": "Notificación marcada como leída",
                "id_notificacion": notification_id,
                "id_usuario": user_id,
                "leida": True,
                "fecha_lectura": now
            }

        except HTTPException:
            raise
        except Exception as e:
            self.db.rollback()
            logger.error(
                f"Error marcando notificación {notification_id} del usuario {user_id}: {e}", exc_info=True
            )
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Error al actualizar notificación"
            )
