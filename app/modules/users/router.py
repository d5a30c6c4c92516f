from fastapi import APIRouter, status, Depends
from sqlalchemy.orm import Session
from typing import List

from app.database.database import get_db
from app.modules.users.service import RoleService, UserService
from app.modules.users.schemas import (
    RoleCreate, RoleOut, UserCreate, UserUpdate, UserCreated, UserOut
)

users_router = APIRouter(tags=["Users"])
roles_router = APIRouter(tags=["Roles"])


@roles_router.get("", response_model=List[RoleOut])
def list_roles(db: Session = Depends(get_db)):
    return RoleService(db).get_all_roles()

@roles_router.post("", response_model=RoleOut, status_code=status.HTTP_201_CREATED)
def create_role(data: RoleCreate, db: Session = Depends(get_db)):
    return RoleService(db).create_role(data)


@users_router.get("", response_model=List[UserOut])
def list_users(db: Session = Depends(get_db)):
    """Usuarios del sistema sin datos sensibles"""
    user_service = UserService(db)
    return user_service.get_all_users()

@users_router.post("", response_model=UserCreated, status_code=status.HTTP_201_CREATED)
def create_user(data: UserCreate, db: Session = Depends(get_db)):
    user_service = UserService(db)
    return user_service.create_user(data)

@users_router.get("/{user_id}", response_model=UserOut)
def get_user(user_id: int, db: Session = Depends(get_db)):
    user_service = UserService(db)
    return user_service.get_user_by_id(user_id)

@users_router.put("/{user_id}", response_model=UserOut)
def update_user(user_id: int, data: UserUpdate, db: Session = Depends(get_db)):
    user_service = UserService(db)
    return user_service.update_user(user_id, data)

@users_router.delete("/{user_id}")
def delete_user(user_id: int, db: Session = Depends(get_db)):
    user_service = UserService(db)
    return user_service.delete_user(user_id)
