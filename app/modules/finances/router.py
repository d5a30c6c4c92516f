from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List

from app.database.database import get_db
from app.modules.finances.service import FinanceService
from app.modules.finances.schemas import (
    FinanceCategoryCreate, FinanceCategoryUpdate, FinanceCategoryOut,
    MovementCreate, MovementUpdate, MovementOut, MovementDeleted
)

finances_router = APIRouter(tags=["Finances"])


# ===== CATEGORÍAS FINANCIERAS =====

@finances_router.get("/categories", response_model=List[FinanceCategoryOut])
def list_categories(db: Session = Depends(get_db)):
    service = FinanceService(db)
    return service.get_categories()

@finances_router.post("/categories", response_model=FinanceCategoryOut, status_code=status.HTTP_201_CREATED)
def create_category(data: FinanceCategoryCreate, db: Session = Depends(get_db)):
    service = FinanceService(db)
    return service.create_category(data)

@finances_router.get("/categories/{category_id}", response_model=FinanceCategoryOut)
def get_category(category_id: int, db: Session = Depends(get_db)):
    service = FinanceService(db)
    return service.get_category_by_id(category_id)

@finances_router.put("/categories/{category_id}", response_model=FinanceCategoryOut)
def update_category(category_id: int, data: FinanceCategoryUpdate, db: Session = Depends(get_db)):
    service = FinanceService(db)
    return service.update_category(category_id, data)

@finances_router.delete("/categories/{category_id}")
def delete_category(category_id: int, db: Session = Depends(get_db)):
    """Eliminar categoría; 409 si tiene movimientos asociados"""
    service = FinanceService(db)
    return service.delete_category(category_id)


# ===== MOVIMIENTOS =====

@finances_router.get("", response_model=List[MovementOut])
def list_movements(db: Session = Depends(get_db)):
    service = FinanceService(db)
    return service.get_movements()

@finances_router.post("", response_model=MovementOut, status_code=status.HTTP_201_CREATED)
def create_movement(data: MovementCreate, db: Session = Depends(get_db)):
    service = FinanceService(db)
    return service.create_movement(data)

@finances_router.get("/{movement_id}", response_model=MovementOut)
def get_movement(movement_id: int, db: Session = Depends(get_db)):
    service = FinanceService(db)
    return service.get_movement_by_id(movement_id)

@finances_router.put("/{movement_id}", response_model=MovementOut)
def update_movement(movement_id: int, data: MovementUpdate, db: Session = Depends(get_db)):
    service = FinanceService(db)
    return service.update_movement(movement_id, data)

@finances_router.delete("/{movement_id}", response_model=MovementDeleted)
def delete_movement(movement_id: int, db: Session = Depends(get_db)):
    """Baja lógica del movimiento (estado_computo = no_computado)"""
    service = FinanceService(db)
    return service.void_movement(movement_id)
