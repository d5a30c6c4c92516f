"""
Credits report service

Cuotas de pedidos a crédito filtradas por fecha programada, con los días de
retraso de las que siguen pendientes.
"""

from decimal import Decimal
from typing import Any, Dict, List

from sqlalchemy.orm import selectinload

from app.modules.orders.models import Pedido, PedidoPago
from .base import BaseReportService

ESTADO_PENDIENTE = "pendiente"


class CreditReportService(BaseReportService):
    """Service for the credit installments report"""

    def _days_late(self, installment: PedidoPago) -> int:
        if installment.estado_pago != ESTADO_PENDIENTE:
            return 0
        return max(self._calculate_days_difference(installment.fecha_pago_programada), 0)

    def get_credits_report(self) -> Dict[str, Any]:
        query = self.db.query(PedidoPago).join(PedidoPago.pedido).options(
            selectinload(PedidoPago.pedido).selectinload(Pedido.vendedor),
            selectinload(PedidoPago.pedido).selectinload(Pedido.cliente)
        )
        query = self._apply_date_filter(query, PedidoPago.fecha_pago_programada)

        if self.filters.vendedor is not None:
            query = query.filter(Pedido.id_vendedor == self.filters.vendedor)
        if self.filters.cliente is not None:
            query = query.filter(Pedido.id_cliente == self.filters.cliente)

        installments = query.order_by(PedidoPago.id_pago.desc()).all()

        rows: List[Dict[str, Any]] = []
        monto_total = monto_pagado = monto_pendiente = Decimal("0.00")

        for installment in installments:
            monto = self._money(installment.monto_cuota)
            pagado = self._money(installment.monto_pagado)
            pendiente = self._money(installment.saldo_pendiente)

            monto_total += monto
            monto_pagado += pagado
            monto_pendiente += pendiente

            rows.append({
                "id_pedido": installment.id_pedido,
                "numero_cuota": installment.numero_cuota,
                "fecha_pago": installment.fecha_pago_programada,
                "dias_retraso": self._days_late(installment),
                "monto": monto,
                "pagado": pagado,
                "pendiente": pendiente,
                "estado": installment.estado_pago,
                "vendedor": self._seller_name(installment.pedido.vendedor),
                "cliente": self._client_name(installment.pedido.cliente),
            })

        return {
            "totalCreditos": len(rows),
            "montoTotalCreditos": monto_total,
            "montoPagadoCreditos": monto_pagado,
            "montoPendienteCreditos": monto_pendiente,
            "cuotas": rows,
        }
