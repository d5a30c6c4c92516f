from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List

from app.database.database import get_db
from app.modules.returns.service import ReturnService
from app.modules.returns.schemas import ReturnCreate, ReturnUpdate, ReturnOut, ReturnDetail

returns_router = APIRouter(tags=["Returns"])


@returns_router.get("", response_model=List[ReturnOut])
def list_returns(db: Session = Depends(get_db)):
    service = ReturnService(db)
    return service.get_returns()

@returns_router.post("", response_model=ReturnDetail, status_code=status.HTTP_201_CREATED)
def create_return(data: ReturnCreate, db: Session = Depends(get_db)):
    """Registrar devolución; requiere id_pedido, id_cliente, id_vendedor y motivo"""
    service = ReturnService(db)
    return service.create_return(data)

@returns_router.get("/{return_id}", response_model=ReturnDetail)
def get_return(return_id: int, db: Session = Depends(get_db)):
    service = ReturnService(db)
    return service.get_return_by_id(return_id)

@returns_router.put("/{return_id}", response_model=ReturnDetail)
def update_return(return_id: int, data: ReturnUpdate, db: Session = Depends(get_db)):
    service = ReturnService(db)
    return service.update_return(return_id, data)

@returns_router.delete("/{return_id}")
def delete_return(return_id: int, db: Session = Depends(get_db)):
    service = ReturnService(db)
    return service.delete_return(return_id)
