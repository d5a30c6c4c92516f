from fastapi import APIRouter, status, Depends
from sqlalchemy.orm import Session
from typing import List

from app.database.database import get_db
from app.modules.categories import service
from app.modules.categories.schemas import CategoryCreate, CategoryOut, CategoryTree

categories_router = APIRouter(tags=["Categories"])

@categories_router.post("", response_model=CategoryOut, status_code=status.HTTP_201_CREATED)
def create_category(data: CategoryCreate, db: Session = Depends(get_db)):
    category_service = service.CategoryService(db)
    return category_service.create_category(data)

@categories_router.get("", response_model=List[CategoryTree])
def list_categories(db: Session = Depends(get_db)):
    category_service = service.CategoryService(db)
    return category_service.get_root_categories()

@categories_router.get("/{category_id}", response_model=CategoryTree)
def get_category(category_id: int, db: Session = Depends(get_db)):
    category_service = service.CategoryService(db)
    return category_service.get_category_by_id(category_id)
