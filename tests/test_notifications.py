"""
Tests de notificaciones y su estado de lectura por usuario
"""
import pytest

from app.modules.auth.utils import hash_password
from app.modules.notifications.models import NotificacionUsuario
from app.modules.users.models import Usuario


@pytest.fixture
def second_user(db_session, role):
    user = Usuario(
        correo_electronico="almacen@reyautomotriz.pe",
        contrasena_hash=hash_password("Almacen!2025"),
        nombre_completo="Ana Almacén",
        id_rol=role.id_rol,
        estado="activo",
    )
    db_session.add(user)
    db_session.commit()
    return user


@pytest.fixture
def notification(client, seller, second_user):
    response = client.post("/api/notifications", json={
        "tipo_notificacion": "stock_bajo",
        "detalle": "Pastillas de freno por debajo del mínimo",
        "usuarios": [seller.id_usuario, second_user.id_usuario, seller.id_usuario],
    })
    assert response.status_code == 201
    return response.json()


class TestCreateNotification:
    """POST /api/notifications"""

    def test_crea_una_fila_por_destinatario(self, notification, db_session):
        assert notification["enviada"] is True
        assert notification["fecha_envio"] is not None
        assert len(notification["destinatarios"]) == 2
        assert all(d["leida"] is False for d in notification["destinatarios"])
        assert db_session.query(NotificacionUsuario).count() == 2

    def test_sin_destinatarios(self, client):
        response = client.post("/api/notifications", json={
            "tipo_notificacion": "aviso", "detalle": "Sin destino", "usuarios": []
        })
        assert response.status_code == 400

    def test_falta_detalle(self, client, seller):
        response = client.post("/api/notifications", json={
            "tipo_notificacion": "aviso", "usuarios": [seller.id_usuario]
        })
        assert response.status_code == 400

    def test_usuario_inexistente(self, client, seller):
        response = client.post("/api/notifications", json={
            "tipo_notificacion": "aviso", "detalle": "x", "usuarios": [seller.id_usuario, 999]
        })
        assert response.status_code == 404


class TestReadState:
    """Bandeja de usuario y marcado como leída"""

    def test_marcar_leida_es_idempotente(self, client, notification, seller):
        url = f"/api/notifications/users/{seller.id_usuario}/{notification['id_notificacion']}"

        first = client.patch(url)
        second = client.patch(url)

        assert first.status_code == 200
        assert second.status_code == 200
        assert second.json()["leida"] is True

        inbox = client.get(f"/api/notifications/users/{seller.id_usuario}").json()
        assert len(inbox) == 1
        assert inbox[0]["leida"] is True
        assert inbox[0]["fecha_lectura"] is not None

    def test_solo_afecta_al_usuario_indicado(self, client, notification, seller, second_user):
        client.patch(f"/api/notifications/users/{seller.id_usuario}/{notification['id_notificacion']}")

        unread = client.get(
            f"/api/notifications/users/{second_user.id_usuario}", params={"leida": "false"}
        ).json()
        assert [n["id_notificacion"] for n in unread] == [notification["id_notificacion"]]

    def test_filtro_leida(self, client, notification, seller):
        client.patch(f"/api/notifications/users/{seller.id_usuario}/{notification['id_notificacion']}")

        assert client.get(f"/api/notifications/users/{seller.id_usuario}", params={"leida": "false"}).json() == []
        assert len(client.get(f"/api/notifications/users/{seller.id_usuario}", params={"leida": "true"}).json()) == 1

    def test_notificacion_no_asociada(self, client, notification):
        response = client.patch(f"/api/notifications/users/999/{notification['id_notificacion']}")

        assert response.status_code == 404
        assert response.json() == {"error": "Notificación no asociada al usuario"}

    def test_lista_general(self, client, notification):
        listed = client.get("/api/notifications").json()
        assert listed[0]["id_notificacion"] == notification["id_notificacion"]
        assert listed[0]["tipo_notificacion"] == "stock_bajo"
