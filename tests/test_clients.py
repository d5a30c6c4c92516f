"""
Tests del módulo de Clientes
"""
import pytest

from app.modules.clients.models import Cliente


@pytest.fixture
def client_payload(seller):
    return {
        "razon_social": "Repuestos Norte S.A.C.",
        "correo_electronico": "Compras@RepuestosNorte.pe",
        "id_vendedor_asignado": seller.id_usuario,
        "ruc": "20601234567",
        "tipo_cliente": "vip",
        "departamento": "La Libertad",
    }


class TestClients:
    """CRUD de /api/clients"""

    def test_crea_cliente(self, client, client_payload):
        response = client.post("/api/clients", json=client_payload)

        assert response.status_code == 201
        data = response.json()
        assert data["estado"] == "activo"
        assert data["correo_electronico"] == "compras@repuestosnorte.pe"
        assert data["nombre_completo"] == "Repuestos Norte S.A.C."
        assert data["vendedor"]["nombre_completo"] == "Carlos Vendedor"

    def test_correo_duplicado(self, client, client_payload, customer):
        client_payload["correo_electronico"] = "CONTACTO@elpiston.pe"
        response = client.post("/api/clients", json=client_payload)

        assert response.status_code == 409
        assert response.json() == {"error": "El correo del cliente ya existe"}

    @pytest.mark.parametrize("field", ["razon_social", "correo_electronico", "id_vendedor_asignado"])
    def test_campos_obligatorios(self, client, client_payload, field):
        del client_payload[field]
        response = client.post("/api/clients", json=client_payload)

        assert response.status_code == 400
        assert field in response.json()["error"]

    def test_ruc_invalido(self, client, client_payload):
        client_payload["ruc"] = "123"
        assert client.post("/api/clients", json=client_payload).status_code == 400

    def test_vendedor_inexistente(self, client, client_payload):
        client_payload["id_vendedor_asignado"] = 999
        assert client.post("/api/clients", json=client_payload).status_code == 404

    def test_lista_activos_por_razon_social(self, client, client_payload, customer):
        client.post("/api/clients", json=client_payload)

        names = [c["razon_social"] for c in client.get("/api/clients").json()]
        assert names == ["Repuestos Norte S.A.C.", "Taller El Pistón S.A.C."]

    def test_eliminar_desactiva(self, client, db_session, customer):
        client_id = customer.id_cliente

        response = client.delete(f"/api/clients/{client_id}")

        assert response.status_code == 200
        assert client.get("/api/clients").json() == []
        db_session.expire_all()
        assert db_session.get(Cliente, client_id).estado == "inactivo"

    def test_actualiza_cliente(self, client, customer):
        response = client.put(
            f"/api/clients/{customer.id_cliente}", json={"telefono_principal": "044-123456"}
        )
        assert response.status_code == 200
        assert response.json()["telefono_principal"] == "044-123456"

    def test_reactiva_cliente_desactivado(self, client, customer):
        client_id = customer.id_cliente
        client.delete(f"/api/clients/{client_id}")

        response = client.put(f"/api/clients/{client_id}", json={"estado": "activo"})

        assert response.status_code == 200
        assert response.json()["estado"] == "activo"
        assert [c["id_cliente"] for c in client.get("/api/clients").json()] == [client_id]

    def test_estado_invalido(self, client, customer):
        response = client.put(f"/api/clients/{customer.id_cliente}", json={"estado": "suspendido"})
        assert response.status_code == 400

    def test_renombrar_actualiza_nombre_derivado(self, client, client_payload):
        client_id = client.post("/api/clients", json=client_payload).json()["id_cliente"]

        response = client.put(f"/api/clients/{client_id}", json={"razon_social": "Repuestos del Norte S.A."})

        assert response.status_code == 200
        assert response.json()["nombre_completo"] == "Repuestos del Norte S.A."

    def test_renombrar_conserva_nombre_propio(self, client, customer):
        response = client.put(f"/api/clients/{customer.id_cliente}", json={"razon_social": "El Pistón E.I.R.L."})

        assert response.status_code == 200
        assert response.json()["razon_social"] == "El Pistón E.I.R.L."
        assert response.json()["nombre_completo"] == "Taller El Pistón"

    def test_actualiza_con_correo_ajeno(self, client, client_payload, customer):
        other_id = client.post("/api/clients", json=client_payload).json()["id_cliente"]

        response = client.put(f"/api/clients/{other_id}", json={"correo_electronico": "contacto@elpiston.pe"})
        assert response.status_code == 409

    def test_cliente_inexistente(self, client):
        response = client.get("/api/clients/999")
        assert response.status_code == 404
        assert response.json() == {"error": "Cliente no encontrado"}
