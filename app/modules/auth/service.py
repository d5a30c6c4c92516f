from fastapi import HTTPException, status
from sqlalchemy import func
from sqlalchemy.orm import Session, selectinload
import logging

from app.modules.auth.schemas import TokenResponse
from app.modules.auth.utils import verify_password, create_access_token, build_token_claims
from app.modules.users.models import Usuario
from app.modules.users.schemas import UserOut

logger = logging.getLogger(__name__)


class AuthService:
    """Servicio de autenticación por correo y contraseña"""

    def __init__(self, db: Session):
        self.db = db

    def login(self, email: str, password: str) -> TokenResponse:
        """
        Login de usuario.

        El correo se compara sin distinguir mayúsculas; solo los usuarios
        activos pueden iniciar sesión.
        """
        email = (email or "").strip().lower()

        user = self.db.query(Usuario).options(
            selectinload(Usuario.rol)
        ).filter(func.lower(Usuario.correo_electronico) == email).first()

        credentials_error = HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Credenciales inválidas"
        )

        if not user or not user.is_active:
            logger.info(f"Intento de login rechazado para {email}")
            raise credentials_error

        if not verify_password(password, user.contrasena_hash):
            logger.info(f"Contraseña incorrecta para {email}")
            raise credentials_error

        access_token = create_access_token(build_token_claims(user))

        return TokenResponse(access_token=access_token, usuario=UserOut.model_validate(user))
