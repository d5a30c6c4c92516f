"""
Cálculo de totales de pedidos

subtotal de línea = cantidad × precio unitario
subtotal del pedido = suma de subtotales de línea
total = subtotal del pedido × (1 + tasa IGV)
IGV = total - subtotal

Los productos y sumas se hacen sin redondear; solo se redondea a céntimos al
guardar subtotal, IGV y total, de modo que el total coincide con
(Σ cantidad × precio) × 1.18 redondeado a dos decimales.

Descuentos y comisiones no se aplican: las columnas existen en el detalle
pero se guardan en cero.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, List, Dict, Any, Optional

from app.core.config import settings

CENT = Decimal('0.01')
ZERO = Decimal('0.00')


def to_money(value) -> Decimal:
    """Redondear a 2 decimales usando ROUND_HALF_UP (redondeo comercial)"""
    return Decimal(str(value)).quantize(CENT, rounding=ROUND_HALF_UP)


class OrderTotalsCalculator:
    """Helper para calcular subtotales, IGV y total de un pedido"""

    def __init__(self, tax_rate: Optional[Decimal] = None):
        self.tax_rate = Decimal(str(tax_rate if tax_rate is not None else settings.IGV_RATE))

    @staticmethod
    def line_amount(quantity, unit_price) -> Decimal:
        """Importe exacto de una línea, sin redondear"""
        return Decimal(str(quantity)) * Decimal(str(unit_price))

    def calculate_line(self, quantity, unit_price) -> Dict[str, Decimal]:
        """
        Calcular una línea del pedido

        Returns:
            Diccionario con cantidad, precio unitario tal como llegó y
            subtotal en céntimos, más los campos de descuento y comisión en cero
        """
        return {
            "cantidad": quantity,
            "precio_unitario": Decimal(str(unit_price)),
            "subtotal": to_money(self.line_amount(quantity, unit_price)),
            "descuento_porcentaje": ZERO,
            "descuento_monto": ZERO,
            "porcentaje_comision": ZERO,
            "monto_comision": ZERO,
        }

    def calculate(self, items: Iterable[Dict[str, Any]]) -> Dict[str, Any]:
        """
        Calcular totales del pedido

        Args:
            items: líneas con formato
                [{"id_producto": int, "cantidad": int, "precio_unitario": Decimal}]

        Returns:
            {"detalles": [...], "subtotal": Decimal, "igv": Decimal, "total": Decimal}
        """
        detalles: List[Dict[str, Any]] = []
        exact_subtotal = Decimal(0)

        for item in items:
            exact_subtotal += self.line_amount(item["cantidad"], item["precio_unitario"])
            line = self.calculate_line(item["cantidad"], item["precio_unitario"])
            line["id_producto"] = item.get("id_producto")
            detalles.append(line)

        subtotal = to_money(exact_subtotal)
        total = to_money(exact_subtotal * (1 + self.tax_rate))
        return {
            "detalles": detalles,
            "subtotal": subtotal,
            "igv": total - subtotal,
            "total": total,
        }
