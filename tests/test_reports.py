"""
Tests de reportes de pedidos, créditos y resumen
"""
from datetime import date, timedelta
from decimal import Decimal

from app.modules.clients.models import Cliente
from app.modules.finances.models import MovimientoFinanciero
from app.modules.reports.schemas import ReportFilters
from app.modules.reports.services import CreditReportService


def _range_params(**extra):
    params = {
        "startDate": (date.today() - timedelta(days=1)).isoformat(),
        "endDate": (date.today() + timedelta(days=1)).isoformat(),
    }
    params.update(extra)
    return params


class TestOrdersReport:
    """GET /api/reports/orders"""

    def test_totales_igual_a_suma_de_filas(self, client, make_order, today):
        make_order(total="118.00", installments=[("59.00", "59.00", today), ("59.00", "0.00", today)])
        make_order(total="236.00")
        make_order(total="35.40", installments=[("35.40", "10.00", today)])

        response = client.get("/api/reports/orders", params=_range_params())

        assert response.status_code == 200
        data = response.json()
        rows = data["pedidos"]
        assert data["totalPedidos"] == len(rows) == 3
        assert Decimal(data["montoTotal"]) == sum(Decimal(r["total"]) for r in rows)
        assert Decimal(data["montoPagado"]) == sum(Decimal(r["pagado"]) for r in rows)
        assert Decimal(data["montoPendiente"]) == sum(Decimal(r["pendiente"]) for r in rows)
        assert Decimal(data["montoPagado"]) == Decimal("69.00")

    def test_pagado_y_pendiente_por_pedido(self, client, make_order, today):
        order = make_order(total="118.00", installments=[("118.00", "18.00", today)])

        row = client.get("/api/reports/orders").json()["pedidos"][0]

        assert row["id_pedido"] == order.id_pedido
        assert Decimal(row["pagado"]) == Decimal("18.00")
        assert Decimal(row["pendiente"]) == Decimal("100.00")
        assert row["vendedor"] == "Carlos Vendedor"
        assert row["cliente"] == "Taller El Pistón"

    def test_filtra_por_cliente(self, client, db_session, make_order, seller):
        other = Cliente(
            id_vendedor_asignado=seller.id_usuario,
            razon_social="Lubricentro Sur E.I.R.L.",
            correo_electronico="ventas@lubrisur.pe",
            estado="activo",
        )
        db_session.add(other)
        db_session.commit()
        make_order(total="118.00")
        make_order(total="59.00", id_cliente=other.id_cliente)

        data = client.get("/api/reports/orders", params={"cliente": other.id_cliente}).json()

        assert data["totalPedidos"] == 1
        assert data["pedidos"][0]["cliente"] == "Lubricentro Sur E.I.R.L."

    def test_ids_no_numericos_se_ignoran(self, client, make_order):
        make_order()
        make_order()

        data = client.get("/api/reports/orders", params={"vendedor": "abc", "cliente": ""}).json()
        assert data["totalPedidos"] == 2

    def test_rango_fuera_de_fecha(self, client, make_order):
        make_order()
        past = date.today() - timedelta(days=30)

        data = client.get(
            "/api/reports/orders",
            params={"startDate": past.isoformat(), "endDate": (past + timedelta(days=2)).isoformat()}
        ).json()
        assert data["totalPedidos"] == 0
        assert Decimal(data["montoTotal"]) == Decimal("0")

    def test_fecha_invalida(self, client):
        response = client.get("/api/reports/orders", params={"startDate": "ayer"})
        assert response.status_code == 400

    def test_exporta_csv(self, client, make_order):
        make_order(total="118.00")

        response = client.get("/api/reports/orders", params={"export": "csv"})

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/csv")
        assert "attachment" in response.headers["content-disposition"]
        lines = response.text.strip().splitlines()
        assert lines[0].startswith("Pedido,Fecha,Vendedor")
        assert len(lines) == 2


class TestCreditsReport:
    """GET /api/reports/credits"""

    def test_dias_retraso(self, client, make_order, today):
        make_order(installments=[
            ("40.00", "0.00", today - timedelta(days=5)),
            ("40.00", "40.00", today - timedelta(days=10)),
            ("38.00", "0.00", today + timedelta(days=20)),
        ])

        data = client.get("/api/reports/credits").json()
        by_number = {c["numero_cuota"]: c for c in data["cuotas"]}

        assert by_number[1]["dias_retraso"] == 5
        assert by_number[2]["dias_retraso"] == 0  # pagada
        assert by_number[3]["dias_retraso"] == 0  # aún no vence

    def test_totales_igual_a_suma_de_filas(self, client, make_order, today):
        make_order(installments=[("59.00", "20.00", today), ("59.00", "0.00", today + timedelta(days=30))])
        make_order(installments=[("118.00", "118.00", today - timedelta(days=3))])

        data = client.get("/api/reports/credits").json()
        rows = data["cuotas"]

        assert data["totalCreditos"] == len(rows) == 3
        assert Decimal(data["montoTotalCreditos"]) == sum(Decimal(r["monto"]) for r in rows)
        assert Decimal(data["montoPagadoCreditos"]) == sum(Decimal(r["pagado"]) for r in rows)
        assert Decimal(data["montoPendienteCreditos"]) == sum(Decimal(r["pendiente"]) for r in rows)

    def test_filtra_por_fecha_programada(self, client, make_order, today):
        make_order(installments=[("10.00", "0.00", today), ("10.00", "0.00", today + timedelta(days=60))])

        data = client.get(
            "/api/reports/credits",
            params={"startDate": today.isoformat(), "endDate": today.isoformat()}
        ).json()

        assert data["totalCreditos"] == 1
        assert data["cuotas"][0]["numero_cuota"] == 1

    def test_filtra_por_vendedor_del_pedido(self, client, make_order, seller, today):
        make_order(installments=[("10.00", "0.00", today)])

        assert client.get("/api/reports/credits", params={"vendedor": seller.id_usuario}).json()["totalCreditos"] == 1
        assert client.get("/api/reports/credits", params={"vendedor": 999}).json()["totalCreditos"] == 0

    def test_fecha_de_referencia_inyectable(self, db_session, make_order):
        due = date(2025, 1, 10)
        make_order(installments=[("10.00", "0.00", due)])

        service = CreditReportService(db_session, ReportFilters(), today=date(2025, 1, 31))
        report = service.get_credits_report()

        assert report["cuotas"][0]["dias_retraso"] == 21


class TestSummaryReport:
    """GET /api/reports/summary"""

    def test_resumen_excluye_movimientos_anulados(self, client, db_session, make_order, seller, product):
        make_order()
        for tipo, monto, estado in (
            ("ingreso", "100.00", "computado"),
            ("ingreso", "50.00", "no_computado"),
            ("egreso", "30.00", "computado"),
        ):
            db_session.add(MovimientoFinanciero(
                tipo_movimiento=tipo,
                razon="Movimiento de prueba",
                monto=Decimal(monto),
                fecha_movimiento=date.today(),
                id_usuario_registro=seller.id_usuario,
                estado_computo=estado,
            ))
        db_session.commit()

        data = client.get("/api/reports/summary").json()

        assert data["productsCount"] == 1
        assert data["usersCount"] == 1
        assert data["ordersCount"] == 1
        assert data["returnsCount"] == 0
        assert Decimal(data["totalIngresos"]) == Decimal("100.00")
        assert Decimal(data["totalEgresos"]) == Decimal("30.00")
