from pydantic import BaseModel, Field

from app.modules.users.schemas import UserOut


class LoginRequest(BaseModel):
    correo_electronico: str = Field(..., min_length=1)
    contrasena: str = Field(..., min_length=1)


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    usuario: UserOut
