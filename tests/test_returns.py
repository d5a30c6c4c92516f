"""
Tests del módulo de Devoluciones
"""
import pytest

from app.modules.returns.models import Devolucion, DevolucionDetalle


@pytest.fixture
def return_payload(make_order, customer, seller, product):
    order = make_order()
    return {
        "id_pedido": order.id_pedido,
        "id_cliente": customer.id_cliente,
        "id_vendedor": seller.id_usuario,
        "motivo": "Producto con falla de fábrica",
        "detalles": [
            {"id_producto": product.id_producto, "cantidad_devuelta": 1, "motivo_producto": "Fisura"}
        ],
    }


class TestReturns:
    """/api/returns"""

    def test_registra_devolucion_con_detalle(self, client, db_session, return_payload):
        response = client.post("/api/returns", json=return_payload)

        assert response.status_code == 201
        data = response.json()
        assert data["estado_devolucion"] == "pendiente"
        assert data["pedido"]["id_pedido"] == return_payload["id_pedido"]
        assert len(data["detalles"]) == 1
        assert db_session.query(DevolucionDetalle).count() == 1

    @pytest.mark.parametrize("field", ["id_pedido", "id_cliente", "id_vendedor", "motivo"])
    def test_campos_obligatorios(self, client, db_session, return_payload, field):
        del return_payload[field]
        response = client.post("/api/returns", json=return_payload)

        assert response.status_code == 400
        assert db_session.query(Devolucion).count() == 0

    def test_pedido_inexistente(self, client, db_session, return_payload):
        return_payload["id_pedido"] = 999
        response = client.post("/api/returns", json=return_payload)

        assert response.status_code == 404
        assert response.json() == {"error": "Pedido no encontrado"}
        assert db_session.query(Devolucion).count() == 0

    @pytest.mark.parametrize("field, message", [
        ("id_cliente", "Cliente no encontrado"),
        ("id_vendedor", "Vendedor no encontrado"),
    ])
    def test_referencia_inexistente(self, client, db_session, return_payload, field, message):
        return_payload[field] = 999
        response = client.post("/api/returns", json=return_payload)

        assert response.status_code == 404
        assert response.json() == {"error": message}
        assert db_session.query(Devolucion).count() == 0

    def test_producto_inexistente_en_detalle(self, client, db_session, return_payload):
        return_payload["detalles"][0]["id_producto"] = 888
        response = client.post("/api/returns", json=return_payload)

        assert response.status_code == 404
        assert response.json() == {"error": "Producto no encontrado: 888"}
        assert db_session.query(Devolucion).count() == 0
        assert db_session.query(DevolucionDetalle).count() == 0

    def test_lista_actualiza_y_elimina(self, client, db_session, return_payload):
        return_id = client.post("/api/returns", json=return_payload).json()["id_devolucion"]

        assert [r["id_devolucion"] for r in client.get("/api/returns").json()] == [return_id]

        updated = client.put(f"/api/returns/{return_id}", json={"estado_devolucion": "aprobada"})
        assert updated.status_code == 200
        assert updated.json()["estado_devolucion"] == "aprobada"

        assert client.delete(f"/api/returns/{return_id}").status_code == 200
        assert db_session.query(Devolucion).count() == 0
        assert db_session.query(DevolucionDetalle).count() == 0

    def test_devolucion_inexistente(self, client):
        assert client.get("/api/returns/999").status_code == 404
