from fastapi import APIRouter, status, Depends
from sqlalchemy.orm import Session
from typing import List

from app.database.database import get_db
from app.modules.providers.service import ProviderService
from app.modules.providers.schemas import ProviderCreate, ProviderOption, ProviderOut

providers_router = APIRouter(tags=["Providers"])


@providers_router.get("", response_model=List[ProviderOption])
def list_providers(db: Session = Depends(get_db)):
    """Proveedores activos para los formularios de productos"""
    return ProviderService(db).get_active_providers()

@providers_router.post("", response_model=ProviderOut, status_code=status.HTTP_201_CREATED)
def create_provider(data: ProviderCreate, db: Session = Depends(get_db)):
    return ProviderService(db).create_provider(data)
