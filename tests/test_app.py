"""
Tests de la aplicación: salud, cabeceras y contrato de errores
"""
from app.core.config import Settings


class TestHealth:

    def test_root(self, client):
        body = client.get("/").json()
        assert body["environment"] == "test"

    def test_health(self, client):
        assert client.get("/health").json() == {"status": "healthy", "environment": "test"}


class TestSecurityHeaders:

    def test_cabeceras_presentes(self, client):
        response = client.get("/health")
        assert response.headers["X-Content-Type-Options"] == "nosniff"
        assert response.headers["X-Frame-Options"] == "DENY"
        assert "Strict-Transport-Security" not in response.headers


class TestErrorContract:

    def test_ruta_inexistente(self, client):
        response = client.get("/api/no-existe")
        assert response.status_code == 404
        assert set(response.json()) == {"error"}

    def test_id_no_numerico(self, client):
        response = client.get("/api/orders/abc")
        assert response.status_code == 400
        assert "error" in response.json()


def test_cors_origins_separados_por_coma():
    settings = Settings(CORS_ORIGINS="http://localhost:3000, https://rey.pe,")
    assert settings.cors_origins == ["http://localhost:3000", "https://rey.pe"]
