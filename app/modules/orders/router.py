from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List

from app.database.database import get_db
from app.modules.orders.service import OrderService
from app.modules.orders.schemas import (
    OrderCreate, OrderUpdate, OrderListItem, OrderCreated, OrderDetail,
    InstallmentCreate, InstallmentPayment, InstallmentOut
)

orders_router = APIRouter(tags=["Orders"])


@orders_router.get("", response_model=List[OrderListItem])
def list_orders(db: Session = Depends(get_db)):
    service = OrderService(db)
    return service.get_orders()


@orders_router.post("", response_model=OrderCreated, status_code=status.HTTP_201_CREATED)
def create_order(order_data: OrderCreate, db: Session = Depends(get_db)):
    """
    Crear pedido.

    - **id_cliente**, **id_vendedor**, **tipo_pago**, **tipo_comprobante**: obligatorios
    - **items**: al menos una línea `{id_producto, cantidad, precio_unitario}`

    subtotal, IGV (18%) y total se calculan en el servidor.
    """
    service = OrderService(db)
    return service.create_order(order_data)


@orders_router.get("/{order_id}", response_model=OrderDetail)
def get_order(order_id: int, db: Session = Depends(get_db)):
    service = OrderService(db)
    return service.get_order_by_id(order_id)


@orders_router.put("/{order_id}", response_model=OrderDetail)
def update_order(order_id: int, order_data: OrderUpdate, db: Session = Depends(get_db)):
    service = OrderService(db)
    return service.update_order(order_id, order_data)


@orders_router.delete("/{order_id}")
def delete_order(order_id: int, db: Session = Depends(get_db)):
    service = OrderService(db)
    return service.delete_order(order_id)


@orders_router.get("/{order_id}/payments", response_model=List[InstallmentOut])
def list_installments(order_id: int, db: Session = Depends(get_db)):
    service = OrderService(db)
    return service.get_installments(order_id)


@orders_router.post("/{order_id}/payments", response_model=InstallmentOut, status_code=status.HTTP_201_CREATED)
def add_installment(order_id: int, data: InstallmentCreate, db: Session = Depends(get_db)):
    service = OrderService(db)
    return service.add_installment(order_id, data)


@orders_router.put("/{order_id}/payments/{payment_id}", response_model=InstallmentOut)
def register_payment(order_id: int, payment_id: int, data: InstallmentPayment, db: Session = Depends(get_db)):
    service = OrderService(db)
    return service.register_payment(order_id, payment_id, data)
