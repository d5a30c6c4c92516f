from fastapi import APIRouter, status, Depends
from sqlalchemy.orm import Session
from typing import List

from app.database.database import get_db
from app.modules.clients.service import ClientService
from app.modules.clients.schemas import ClientCreate, ClientUpdate, ClientOut

clients_router = APIRouter(tags=["Clients"])


@clients_router.get("", response_model=List[ClientOut])
def list_clients(db: Session = Depends(get_db)):
    """Clientes activos con su vendedor asignado"""
    client_service = ClientService(db)
    return client_service.get_active_clients()

@clients_router.post("", response_model=ClientOut, status_code=status.HTTP_201_CREATED)
def create_client(data: ClientCreate, db: Session = Depends(get_db)):
    client_service = ClientService(db)
    return client_service.create_client(data)

@clients_router.get("/{client_id}", response_model=ClientOut)
def get_client(client_id: int, db: Session = Depends(get_db)):
    client_service = ClientService(db)
    return client_service.get_client_by_id(client_id)

@clients_router.put("/{client_id}", response_model=ClientOut)
def update_client(client_id: int, data: ClientUpdate, db: Session = Depends(get_db)):
    client_service = ClientService(db)
    return client_service.update_client(client_id, data)

@clients_router.delete("/{client_id}")
def delete_client(client_id: int, db: Session = Depends(get_db)):
    client_service = ClientService(db)
    return client_service.disable_client(client_id)
