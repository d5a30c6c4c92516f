"""
Tests del módulo de Pedidos

Cubre creación con totales calculados en el servidor, validación de datos
incompletos sin escrituras parciales y el registro de cuotas y abonos.
"""
from datetime import date, timedelta
from decimal import Decimal

from app.modules.orders.models import Pedido, PedidoDetalle, PedidoPago
from app.modules.returns.models import Devolucion


class TestCreateOrder:
    """POST /api/orders"""

    def test_crea_pedido_con_totales(self, client, order_payload, seller):
        response = client.post("/api/orders", json=order_payload)

        assert response.status_code == 201
        data = response.json()
        assert Decimal(data["subtotal"]) == Decimal("25.00")
        assert Decimal(data["igv"]) == Decimal("4.50")
        assert Decimal(data["total"]) == Decimal("29.50")
        assert data["estado_pedido"] == "pendiente"
        assert data["id_usuario_creacion"] == seller.id_usuario
        assert len(data["detalles"]) == 2
        assert Decimal(data["detalles"][0]["descuento_monto"]) == Decimal("0")

    def test_precio_con_fraccion_de_centimo(self, client, order_payload):
        order_payload["items"] = [
            {"id_producto": order_payload["items"][0]["id_producto"], "cantidad": 3, "precio_unitario": "0.333"},
        ]
        response = client.post("/api/orders", json=order_payload)

        assert response.status_code == 201
        data = response.json()
        assert Decimal(data["total"]) == Decimal("1.18")
        assert Decimal(data["detalles"][0]["precio_unitario"]) == Decimal("0.333")

    def test_precio_con_mas_de_cuatro_decimales(self, client, db_session, order_payload):
        order_payload["items"][0]["precio_unitario"] = "1.23456"
        response = client.post("/api/orders", json=order_payload)

        assert response.status_code == 400
        assert db_session.query(Pedido).count() == 0

    def test_ignora_totales_enviados_por_el_cliente(self, client, order_payload):
        order_payload["total"] = "1.00"
        response = client.post("/api/orders", json=order_payload)

        assert response.status_code == 201
        assert Decimal(response.json()["total"]) == Decimal("29.50")

    def test_items_vacios_no_crea_nada(self, client, db_session, order_payload):
        order_payload["items"] = []
        response = client.post("/api/orders", json=order_payload)

        assert response.status_code == 400
        assert response.json()["error"].startswith("Datos incompletos")
        assert db_session.query(Pedido).count() == 0
        assert db_session.query(PedidoDetalle).count() == 0

    def test_sin_items(self, client, db_session, order_payload):
        del order_payload["items"]
        response = client.post("/api/orders", json=order_payload)

        assert response.status_code == 400
        assert "items" in response.json()["error"]
        assert db_session.query(Pedido).count() == 0

    def test_falta_cliente(self, client, db_session, order_payload):
        del order_payload["id_cliente"]
        response = client.post("/api/orders", json=order_payload)

        assert response.status_code == 400
        assert response.json() == {"error": "Datos incompletos: falta el campo 'id_cliente'"}
        assert db_session.query(Pedido).count() == 0

    def test_tipo_pago_invalido(self, client, order_payload):
        order_payload["tipo_pago"] = "trueque"
        response = client.post("/api/orders", json=order_payload)
        assert response.status_code == 400

    def test_producto_inexistente(self, client, db_session, order_payload):
        order_payload["items"][0]["id_producto"] = 999
        response = client.post("/api/orders", json=order_payload)

        assert response.status_code == 404
        assert db_session.query(Pedido).count() == 0


class TestReadUpdateDeleteOrder:
    """GET/PUT/DELETE /api/orders/{id}"""

    def test_lista_mas_reciente_primero(self, client, make_order):
        first = make_order(total="118.00")
        second = make_order(total="59.00")
        first_id, second_id = first.id_pedido, second.id_pedido

        response = client.get("/api/orders")

        assert response.status_code == 200
        ids = [o["id_pedido"] for o in response.json()]
        assert ids == [second_id, first_id]
        assert response.json()[0]["cliente"]["razon_social"] == "Taller El Pistón S.A.C."
        assert response.json()[0]["vendedor"]["nombre_completo"] == "Carlos Vendedor"

    def test_detalle_con_lineas_y_cuotas(self, client, make_order, today):
        order = make_order(installments=[("59.00", "0.00", today)])

        response = client.get(f"/api/orders/{order.id_pedido}")

        assert response.status_code == 200
        data = response.json()
        assert len(data["detalles"]) == 1
        assert data["detalles"][0]["producto"]["codigo_producto"] == "FR-0001"
        assert len(data["pagos"]) == 1

    def test_pedido_no_encontrado(self, client):
        response = client.get("/api/orders/999")
        assert response.status_code == 404
        assert response.json() == {"error": "Pedido no encontrado"}

    def test_actualiza_cabecera(self, client, make_order):
        order = make_order()
        response = client.put(
            f"/api/orders/{order.id_pedido}",
            json={"estado_pedido": "entregado", "observaciones": "Entregado en taller"}
        )

        assert response.status_code == 200
        assert response.json()["estado_pedido"] == "entregado"
        assert response.json()["observaciones"] == "Entregado en taller"

    def test_elimina_con_lineas_y_cuotas(self, client, db_session, make_order, today):
        order = make_order(installments=[("118.00", "0.00", today)])

        response = client.delete(f"/api/orders/{order.id_pedido}")

        assert response.status_code == 200
        assert db_session.query(Pedido).count() == 0
        assert db_session.query(PedidoDetalle).count() == 0
        assert db_session.query(PedidoPago).count() == 0

    def test_no_elimina_pedido_con_devoluciones(self, client, db_session, make_order, customer, seller):
        order = make_order()
        order_id = order.id_pedido
        db_session.add(Devolucion(
            id_pedido=order_id,
            id_cliente=customer.id_cliente,
            id_vendedor=seller.id_usuario,
            motivo="Pieza equivocada",
        ))
        db_session.commit()

        response = client.delete(f"/api/orders/{order_id}")

        assert response.status_code == 409
        db_session.expire_all()
        assert db_session.get(Pedido, order_id) is not None
        assert db_session.query(PedidoDetalle).filter_by(id_pedido=order_id).count() == 1

    def test_elimina_inexistente(self, client):
        assert client.delete("/api/orders/999").status_code == 404


class TestInstallments:
    """Cuotas y abonos de pedidos a crédito"""

    def test_programa_cuota(self, client, make_order):
        order = make_order()
        due = (date.today() + timedelta(days=30)).isoformat()

        response = client.post(
            f"/api/orders/{order.id_pedido}/payments",
            json={"numero_cuota": 1, "monto_cuota": "59.00", "fecha_pago_programada": due}
        )

        assert response.status_code == 201
        data = response.json()
        assert data["estado_pago"] == "pendiente"
        assert Decimal(data["monto_pagado"]) == Decimal("0")
        assert Decimal(data["saldo_pendiente"]) == Decimal("59.00")

    def test_cuota_duplicada(self, client, make_order, today):
        order = make_order(installments=[("59.00", "0.00", today)])

        response = client.post(
            f"/api/orders/{order.id_pedido}/payments",
            json={"numero_cuota": 1, "monto_cuota": "10.00", "fecha_pago_programada": today.isoformat()}
        )
        assert response.status_code == 409

    def test_abono_parcial_y_total(self, client, make_order, today):
        order = make_order(installments=[("100.00", "0.00", today)])
        payment_id = order.pagos[0].id_pago
        url = f"/api/orders/{order.id_pedido}/payments/{payment_id}"

        partial = client.put(url, json={"monto_pagado": "40.00"})
        assert partial.status_code == 200
        assert Decimal(partial.json()["saldo_pendiente"]) == Decimal("60.00")
        assert partial.json()["estado_pago"] == "pendiente"

        final = client.put(url, json={"monto_pagado": "60.00"})
        assert final.status_code == 200
        assert Decimal(final.json()["monto_pagado"]) == Decimal("100.00")
        assert Decimal(final.json()["saldo_pendiente"]) == Decimal("0.00")
        assert final.json()["estado_pago"] == "pagado"

    def test_abono_excede_saldo(self, client, make_order, today):
        order = make_order(installments=[("50.00", "20.00", today)])
        url = f"/api/orders/{order.id_pedido}/payments/{order.pagos[0].id_pago}"

        response = client.put(url, json={"monto_pagado": "30.01"})
        assert response.status_code == 400

    def test_abono_no_positivo(self, client, make_order, today):
        order = make_order(installments=[("50.00", "0.00", today)])
        url = f"/api/orders/{order.id_pedido}/payments/{order.pagos[0].id_pago}"

        assert client.put(url, json={"monto_pagado": "0"}).status_code == 400

    def test_cuota_de_otro_pedido(self, client, make_order, today):
        first = make_order(installments=[("50.00", "0.00", today)])
        second = make_order()

        response = client.put(
            f"/api/orders/{second.id_pedido}/payments/{first.pagos[0].id_pago}",
            json={"monto_pagado": "10.00"}
        )
        assert response.status_code == 404
