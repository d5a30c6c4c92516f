from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.database.database import get_db
from app.modules.auth.dependencies import current_user_dependency
from app.modules.auth.schemas import LoginRequest, TokenResponse
from app.modules.auth.service import AuthService
from app.modules.users.schemas import UserOut

auth_router = APIRouter()


@auth_router.post("/login", response_model=TokenResponse)
def login(data: LoginRequest, db: Session = Depends(get_db)):
    """
    Login de usuario. Retorna token de acceso y datos del usuario con su rol.
    """
    auth_service = AuthService(db)
    return auth_service.login(data.correo_electronico, data.contrasena)


@auth_router.get("/me", response_model=UserOut)
def me(current_user: current_user_dependency):
    """Usuario autenticado actual."""
    return current_user
