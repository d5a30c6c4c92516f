"""
Orders report service

Pedidos del periodo con lo pagado (suma de sus cuotas) y lo pendiente.
"""

from decimal import Decimal
from typing import Any, Dict, List

from sqlalchemy.orm import selectinload

from app.modules.orders.models import Pedido
from .base import BaseReportService


class OrderReportService(BaseReportService):
    """Service for the sales orders report"""

    def get_orders_report(self) -> Dict[str, Any]:
        query = self.db.query(Pedido).options(
            selectinload(Pedido.cliente),
            selectinload(Pedido.vendedor),
            selectinload(Pedido.pagos)
        )
        query = self._apply_datetime_filter(query, Pedido.fecha_creacion)

        if self.filters.vendedor is not None:
            query = query.filter(Pedido.id_vendedor == self.filters.vendedor)
        if self.filters.cliente is not None:
            query = query.filter(Pedido.id_cliente == self.filters.cliente)

        orders = query.order_by(Pedido.id_pedido.desc()).all()

        rows: List[Dict[str, Any]] = []
        monto_total = monto_pagado = monto_pendiente = Decimal("0.00")

        for order in orders:
            total = self._money(order.total)
            pagado = self._money(sum((Decimal(p.monto_pagado or 0) for p in order.pagos), Decimal("0")))
            pendiente = total - pagado

            monto_total += total
            monto_pagado += pagado
            monto_pendiente += pendiente

            rows.append({
                "id_pedido": order.id_pedido,
                "fecha": order.fecha_creacion,
                "vendedor": self._seller_name(order.vendedor),
                "cliente": self._client_name(order.cliente),
                "tipo_pago": order.tipo_pago,
                "tipo_comprobante": order.tipo_comprobante,
                "total": total,
                "pagado": pagado,
                "pendiente": pendiente,
            })

        return {
            "totalPedidos": len(rows),
            "montoTotal": monto_total,
            "montoPagado": monto_pagado,
            "montoPendiente": monto_pendiente,
            "pedidos": rows,
        }
