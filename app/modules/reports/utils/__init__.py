"""
Utilities for Reports module

Exportación CSV de las filas de detalle de cada reporte.
"""

import csv
import io
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Dict, List

from fastapi import Response


def create_csv_response(
    data: List[Dict[str, Any]],
    filename: str,
    headers: Dict[str, str] = None
) -> Response:
    """
    Create a CSV response from a list of dictionaries.

    Args:
        data: List of dictionaries with report rows
        filename: Name for the CSV file
        headers: Optional mapping of field names to CSV headers

    Returns:
        FastAPI Response with CSV content
    """
    output = io.StringIO()

    fieldnames = list(headers.keys()) if headers else list(data[0].keys()) if data else []
    csv_headers = list(headers.values()) if headers else fieldnames

    if fieldnames:
        writer = csv.DictWriter(output, fieldnames=fieldnames, extrasaction="ignore")
        writer.writerow(dict(zip(fieldnames, csv_headers)))
        for row in data:
            writer.writerow({key: format_csv_value(row.get(key)) for key in fieldnames})

    csv_content = output.getvalue()
    output.close()

    return Response(
        content=csv_content,
        media_type="text/csv",
        headers={
            "Content-Disposition": f"attachment; filename={filename}",
            "Content-Type": "text/csv; charset=utf-8"
        }
    )


def format_csv_value(value: Any) -> str:
    """Format a value for CSV export"""
    if value is None:
        return ""
    elif isinstance(value, Decimal):
        return str(value)
    elif isinstance(value, (date, datetime)):
        return value.isoformat()
    elif isinstance(value, bool):
        return "Sí" if value else "No"
    else:
        return str(value)


def build_filename(prefix: str, start_date: date = None, end_date: date = None) -> str:
    parts = [prefix]
    if start_date:
        parts.append(start_date.isoformat())
    if end_date:
        parts.append(end_date.isoformat())
    return "_".join(parts) + ".csv"


CSV_HEADERS = {
    "orders": {
        "id_pedido": "Pedido",
        "fecha": "Fecha",
        "vendedor": "Vendedor",
        "cliente": "Cliente",
        "tipo_pago": "Tipo de Pago",
        "tipo_comprobante": "Comprobante",
        "total": "Total",
        "pagado": "Pagado",
        "pendiente": "Pendiente"
    },
    "credits": {
        "id_pedido": "Pedido",
        "numero_cuota": "Cuota",
        "fecha_pago": "Fecha de Pago",
        "dias_retraso": "Días de Retraso",
        "monto": "Monto",
        "pagado": "Pagado",
        "pendiente": "Pendiente",
        "estado": "Estado",
        "vendedor": "Vendedor",
        "cliente": "Cliente"
    }
}
