from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from typing import List, Optional

from app.database.database import get_db
from app.modules.notifications.service import NotificationService
from app.modules.notifications.schemas import NotificationCreate, NotificationOut, UserNotificationOut

notifications_router = APIRouter(tags=["Notifications"])


@notifications_router.get("", response_model=List[NotificationOut])
def list_notifications(db: Session = Depends(get_db)):
    service = NotificationService(db)
    return service.get_notifications()

@notifications_router.post("", response_model=NotificationOut, status_code=status.HTTP_201_CREATED)
def create_notification(data: NotificationCreate, db: Session = Depends(get_db)):
    service = NotificationService(db)
    return service.create_notification(data)

@notifications_router.get("/users/{user_id}", response_model=List[UserNotificationOut])
def list_user_notifications(
    user_id: int,
    leida: Optional[bool] = Query(None, description="Filtrar por estado de lectura"),
    db: Session = Depends(get_db)
):
    service = NotificationService(db)
    return service.get_user_notifications(user_id, leida)

@notifications_router.patch("/users/{user_id}/{notification_id}")
def mark_notification_read(user_id: int, notification_id: int, db: Session = Depends(get_db)):
    """Marcar como leída; idempotente"""
    service = NotificationService(db)
    return service.mark_as_read(user_id, notification_id)
