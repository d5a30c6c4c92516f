from fastapi import HTTPException, status
from sqlalchemy.orm import Session, selectinload
from sqlalchemy.exc import IntegrityError
from decimal import Decimal
from typing import List, Dict
from datetime import date
import logging

from app.modules.clients.models import Cliente
from app.modules.orders.calculator import OrderTotalsCalculator, to_money
from app.modules.orders.models import Pedido, PedidoDetalle, PedidoPago
from app.modules.orders.schemas import (
    OrderCreate, OrderUpdate, InstallmentCreate, InstallmentPayment, EstadoPago
)
from app.modules.products.models import Producto
from app.modules.users.models import Usuario

logger = logging.getLogger(__name__)


class OrderService:
    def __init__(self, db: Session):
        self.db = db
        self.calculator = OrderTotalsCalculator()

    def _validate_references(self, order_data: OrderCreate) -> None:
        """Validar que cliente, vendedor y productos existan antes de escribir"""
        if not self.db.get(Cliente, order_data.id_cliente):
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Cliente no encontrado"
            )
        if not self.db.get(Usuario, order_data.id_vendedor):
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Vendedor no encontrado"
            )

        product_ids = {item.id_producto for item in order_data.items}
        found = {
            row.id_producto for row in
            self.db.query(Producto.id_producto).filter(Producto.id_producto.in_(product_ids)).all()
        }
        missing = sorted(product_ids - found)
        if missing:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Producto no encontrado: {', '.join(str(pid) for pid in missing)}"
            )

    def get_orders(self) -> List[Pedido]:
        """Pedidos con cliente y vendedor, del más reciente al más antiguo"""
        return self.db.query(Pedido).options(
            selectinload(Pedido.cliente),
            selectinload(Pedido.vendedor)
        ).order_by(Pedido.id_pedido.desc()).all()

    def get_order_by_id(self, order_id: int) -> Pedido:
        order = self.db.query(Pedido).options(
            selectinload(Pedido.cliente),
            selectinload(Pedido.vendedor),
            selectinload(Pedido.detalles).selectinload(PedidoDetalle.producto),
            selectinload(Pedido.pagos)
        ).filter(Pedido.id_pedido == order_id).first()

        if not order:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Pedido no encontrado"
            )
        return order

    def create_order(self, order_data: OrderCreate) -> Pedido:
        """
        Crear pedido con sus líneas

        Los totales se calculan en el servidor; cabecera y detalles se
        guardan en un único commit.
        """
        self._validate_references(order_data)

        totals = self.calculator.calculate(item.model_dump() for item in order_data.items)

        try:
            order = Pedido(
                id_cliente=order_data.id_cliente,
                id_vendedor=order_data.id_vendedor,
                tipo_pago=order_data.tipo_pago,
                tipo_comprobante=order_data.tipo_comprobante,
                subtotal=totals["subtotal"],
                igv=totals["igv"],
                total=totals["total"],
                observaciones=order_data.observaciones,
                id_usuario_creacion=order_data.id_vendedor,
            )
            for line in totals["detalles"]:
                order.detalles.append(PedidoDetalle(**line))

            self.db.add(order)
            self.db.commit()
            self.db.refresh(order)

            logger.info(
                f"Pedido {order.id_pedido} creado: {len(totals['detalles'])} items, "
                f"subtotal={totals['subtotal']} igv={totals['igv']} total={totals['total']}"
            )
            return order

        except IntegrityError as e:
            self.db.rollback()
            logger.warning(f"Conflicto de integridad creando pedido: {e}")
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="Conflicto de integridad al crear pedido"
            )
        except Exception as e:
            self.db.rollback()
            logger.error(f"Error creando pedido: {e}", exc_info=True)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Error al crear pedido"
            )

    def update_order(self, order_id: int, order_data: OrderUpdate) -> Pedido:
        """Actualizar campos de cabecera; los totales no se editan"""
        order = self.get_order_by_id(order_id)
        try:
            for field, value in order_data.model_dump(exclude_unset=True, exclude_none=True).items():
                setattr(order, field, value)
            self.db.commit()
            return self.get_order_by_id(order_id)

        except Exception as e:
            self.db.rollback()
            logger.error(f"Error actualizando pedido {order_id}: {e}", exc_info=True)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Error al actualizar pedido"
            )

    def delete_order(self, order_id: int) -> Dict[str, str]:
        """Eliminar pedido con sus detalles y cuotas"""
        order = self.get_order_by_id(order_id)
        try:
            self.db.delete(order)
            self.db.commit()
            logger.info(f"Pedido {order_id} eliminado")
            return {"message": "Pedido eliminado"}

        except IntegrityError:
            self.db.rollback()
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="No se puede eliminar un pedido con devoluciones asociadas"
            )
        except Exception as e:
            self.db.rollback()
            logger.error(f"Error eliminando pedido {order_id}: {e}", exc_info=True)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Error al eliminar pedido"
            )

    # ===== CUOTAS =====

    def get_installments(self, order_id: int) -> List[PedidoPago]:
        order = self.get_order_by_id(order_id)
        return list(order.pagos)

    def add_installment(self, order_id: int, data: InstallmentCreate) -> PedidoPago:
        """Programar una cuota; nace pendiente con saldo igual al monto"""
        order = self.get_order_by_id(order_id)

        if any(p.numero_cuota == data.numero_cuota for p in order.pagos):
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail=f"La cuota {data.numero_cuota} ya existe para este pedido"
            )

        amount = to_money(data.monto_cuota)
        try:
            installment = PedidoPago(
                id_pedido=order.id_pedido,
                numero_cuota=data.numero_cuota,
                monto_cuota=amount,
                monto_pagado=Decimal('0.00'),
                saldo_pendiente=amount,
                fecha_pago_programada=data.fecha_pago_programada,
                estado_pago=EstadoPago.PENDIENTE.value
            )
            self.db.add(installment)
            self.db.commit()
            self.db.refresh(installment)
            return installment

        except IntegrityError:
            self.db.rollback()
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail=f"La cuota {data.numero_cuota} ya existe para este pedido"
            )
        except Exception as e:
            self.db.rollback()
            logger.error(f"Error registrando cuota del pedido {order_id}: {e}", exc_info=True)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Error al registrar cuota"
            )

    def register_payment(self, order_id: int, payment_id: int, data: InstallmentPayment) -> PedidoPago:
        """
        Registrar un abono a una cuota

        El abono no puede superar el saldo pendiente; cuando el saldo llega
        a cero la cuota pasa a 'pagado'.
        """
        installment = self.db.query(PedidoPago).filter(
            PedidoPago.id_pago == payment_id,
            PedidoPago.id_pedido == order_id
        ).first()

        if not installment:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Cuota no encontrada"
            )

        amount = to_money(data.monto_pagado)
        pending = Decimal(installment.saldo_pendiente)
        if amount > pending:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"El monto excede el saldo pendiente ({pending})"
            )

        try:
            installment.monto_pagado = to_money(Decimal(installment.monto_pagado) + amount)
            installment.saldo_pendiente = to_money(pending - amount)
            installment.fecha_pago_real = data.fecha_pago_real or date.today()
            if installment.saldo_pendiente == Decimal('0.00'):
                installment.estado_pago = EstadoPago.PAGADO.value

            self.db.commit()
            self.db.refresh(installment)
            logger.info(
                f"Abono de {amount} a la cuota {installment.numero_cuota} del pedido {order_id}; "
                f"saldo {installment.saldo_pendiente}"
            )
            return installment

        except Exception as e:
            self.db.rollback()
            logger.error(f"Error registrando abono en cuota {payment_id}: {e}", exc_info=True)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Error al registrar el pago"
            )
