"""
Hash de contraseñas y tokens de acceso
"""
from passlib.context import CryptContext
from fastapi import HTTPException, status
from datetime import datetime, timedelta, timezone
from typing import Optional, Dict, Any
import jwt

from app.core.config import settings

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain: str, hashed: str) -> bool:
    """Comparar contraseña en texto plano con su hash; sin hash nunca coincide"""
    if not plain or not hashed:
        return False
    return pwd_context.verify(plain, hashed)


def build_token_claims(user) -> Dict[str, Any]:
    """Claims del token para un Usuario: id, correo, nombre y rol"""
    return {
        "sub": str(user.id_usuario),
        "email": user.correo_electronico,
        "name": user.nombre_completo,
        "id_rol": user.id_rol,
    }


def create_access_token(claims: Dict[str, Any], expires_delta: Optional[timedelta] = None) -> str:
    """
    Firmar un token de acceso.

    Expira a los ACCESS_TOKEN_EXPIRE_MINUTES (una jornada) salvo que se
    indique otro plazo.
    """
    expires_delta = expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    payload = {
        **claims,
        "exp": datetime.now(timezone.utc) + expires_delta,
        "type": "access",
    }
    return jwt.encode(payload, settings.APP_SECRET_STRING, algorithm=settings.ALGORITHM)


def verify_token(token: str) -> Dict[str, Any]:
    try:
        return jwt.decode(token, settings.APP_SECRET_STRING, algorithms=[settings.ALGORITHM])
    except jwt.ExpiredSignatureError:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Token expirado")
    except jwt.InvalidTokenError:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Token inválido")
