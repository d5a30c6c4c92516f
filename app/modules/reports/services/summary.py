from decimal import Decimal
from typing import Any, Dict

from sqlalchemy import func

from app.modules.finances.models import MovimientoFinanciero
from app.modules.orders.models import Pedido
from app.modules.products.models import Producto
from app.modules.returns.models import Devolucion
from app.modules.users.models import Usuario
from .base import BaseReportService


class SummaryReportService(BaseReportService):
    """Conteos y totales del tablero principal"""

    def _sum_movements(self, tipo: str) -> Decimal:
        # Los movimientos anulados (no_computado) no suman
        total = self.db.query(func.coalesce(func.sum(MovimientoFinanciero.monto), 0)).filter(
            MovimientoFinanciero.tipo_movimiento == tipo,
            MovimientoFinanciero.estado_computo == MovimientoFinanciero.COMPUTADO
        ).scalar()
        return self._money(total)

    def get_summary(self) -> Dict[str, Any]:
        return {
            "productsCount": self.db.query(func.count(Producto.id_producto)).scalar(),
            "usersCount": self.db.query(func.count(Usuario.id_usuario)).scalar(),
            "ordersCount": self.db.query(func.count(Pedido.id_pedido)).scalar(),
            "returnsCount": self.db.query(func.count(Devolucion.id_devolucion)).scalar(),
            "totalIngresos": self._sum_movements("ingreso"),
            "totalEgresos": self._sum_movements("egreso"),
        }
