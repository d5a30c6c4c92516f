from sqlalchemy import func
from sqlalchemy.orm import Session, selectinload
from sqlalchemy.exc import IntegrityError
from fastapi import HTTPException, status
from typing import Dict, List
import logging

from app.modules.auth.utils import hash_password
from app.modules.users.models import Role, Usuario
from app.modules.users.schemas import RoleCreate, UserCreate, UserUpdate

logger = logging.getLogger(__name__)


class RoleService:
    """Servicio para gestión de roles"""

    def __init__(self, db: Session):
        self.db = db

    def get_all_roles(self) -> List[Role]:
        return self.db.query(Role).order_by(Role.id_rol.asc()).all()

    def create_role(self, data: RoleCreate) -> Role:
        existing = self.db.query(Role).filter(Role.nombre_rol == data.nombre_rol).first()
        if existing:
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail=f"Ya existe un rol con el nombre '{data.nombre_rol}'"
            )
        try:
            role = Role(nombre_rol=data.nombre_rol, descripcion=data.descripcion)
            self.db.add(role)
            self.db.commit()
            self.db.refresh(role)
            return role
        except IntegrityError:
            self.db.rollback()
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail=f"Ya existe un rol con el nombre '{data.nombre_rol}'"
            )


class UserService:
    """Servicio para gestión de usuarios del sistema"""

    def __init__(self, db: Session):
        self.db = db

    def _email_taken(self, email: str, exclude_id: int = None) -> bool:
        query = self.db.query(Usuario).filter(func.lower(Usuario.correo_electronico) == email.lower())
        if exclude_id is not None:
            query = query.filter(Usuario.id_usuario != exclude_id)
        return query.first() is not None

    def _ensure_role(self, role_id: int) -> None:
        if not self.db.get(Role, role_id):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Rol no válido"
            )

    def get_all_users(self) -> List[Usuario]:
        return self.db.query(Usuario).options(
            selectinload(Usuario.rol)
        ).order_by(Usuario.id_usuario.asc()).all()

    def get_user_by_id(self, user_id: int) -> Usuario:
        user = self.db.query(Usuario).options(
            selectinload(Usuario.rol)
        ).filter(Usuario.id_usuario == user_id).first()

        if not user:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Usuario no encontrado"
            )
        return user

    def create_user(self, data: UserCreate) -> Usuario:
        """
        Crear nuevo usuario

        El correo se guarda en minúsculas y la contraseña con hash bcrypt.
        """
        if self._email_taken(data.correo_electronico):
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="El correo ya existe"
            )
        self._ensure_role(data.id_rol)

        try:
            user = Usuario(
                correo_electronico=data.correo_electronico.lower(),
                contrasena_hash=hash_password(data.contrasena),
                nombre_completo=data.nombre_completo,
                id_rol=data.id_rol,
                estado=data.estado or Usuario.ESTADO_ACTIVO
            )
            self.db.add(user)
            self.db.commit()
            self.db.refresh(user)
            logger.info(f"Usuario creado: {user.id_usuario} ({user.correo_electronico})")
            return user

        except IntegrityError:
            self.db.rollback()
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="El correo ya existe"
            )
        except Exception as e:
            self.db.rollback()
            logger.error(f"Error creando usuario: {e}", exc_info=True)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Error al crear usuario"
            )

    def update_user(self, user_id: int, data: UserUpdate) -> Usuario:
        """Actualizar usuario; si llega contraseña se vuelve a hashear"""
        user = self.get_user_by_id(user_id)
        update_dict = data.model_dump(exclude_unset=True, exclude_none=True)

        email = update_dict.get("correo_electronico")
        if email and self._email_taken(email, exclude_id=user_id):
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="El correo ya existe"
            )
        if "id_rol" in update_dict:
            self._ensure_role(update_dict["id_rol"])

        password = update_dict.pop("contrasena", None)
        if password:
            user.contrasena_hash = hash_password(password)

        try:
            for field, value in update_dict.items():
                setattr(user, field, value)
            self.db.commit()
            self.db.refresh(user)
            return user

        except IntegrityError:
            self.db.rollback()
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="El correo ya existe"
            )
        except Exception as e:
            self.db.rollback()
            logger.error(f"Error actualizando usuario {user_id}: {e}", exc_info=True)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Error al actualizar usuario"
            )

    def delete_user(self, user_id: int) -> Dict[str, str]:
        """Eliminar usuario"""
        user = self.get_user_by_id(user_id)
        try:
            self.db.delete(user)
            self.db.commit()
            return {"message": "Usuario eliminado"}

        except IntegrityError:
            self.db.rollback()
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="No se puede eliminar un usuario con registros asociados"
            )
        except Exception as e:
            self.db.rollback()
            logger.error(f"Error eliminando usuario {user_id}: {e}", exc_info=True)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Error al eliminar usuario"
            )
