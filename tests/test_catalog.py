"""
Tests de catálogo: categorías, proveedores y productos
"""
from decimal import Decimal

import pytest

from app.modules.products.models import (
    Producto, ProductoImportacion, ProductoImagen, ProductoPorcentajeVenta
)
from app.modules.providers.models import Proveedor


@pytest.fixture
def provider(db_session):
    proveedor = Proveedor(nombre_proveedor="Importadora Andina", ruc="20555555555", estado="activo")
    db_session.add(proveedor)
    db_session.commit()
    return proveedor


class TestCategories:
    """/api/categories"""

    def test_arbol_de_categorias(self, client, category):
        response = client.post("/api/categories", json={
            "nombre_categoria": "Pastillas", "id_categoria_padre": category.id_categoria
        })
        assert response.status_code == 201
        assert Decimal(response.json()["porcentaje_alerta_stock"]) == Decimal("10")

        roots = client.get("/api/categories").json()
        assert [c["nombre_categoria"] for c in roots] == ["Frenos"]
        assert [s["nombre_categoria"] for s in roots[0]["subcategorias"]] == ["Pastillas"]

    def test_categoria_duplicada(self, client, category):
        response = client.post("/api/categories", json={"nombre_categoria": "Frenos"})
        assert response.status_code == 409
        assert response.json() == {"error": "La categoría ya existe"}

    def test_padre_inexistente(self, client):
        response = client.post("/api/categories", json={"nombre_categoria": "Discos", "id_categoria_padre": 99})
        assert response.status_code == 404

    def test_falta_nombre(self, client):
        assert client.post("/api/categories", json={}).status_code == 400


class TestProviders:
    """/api/providers"""

    def test_lista_activos_por_nombre(self, client, provider):
        client.post("/api/providers", json={"nombre_proveedor": "Autopartes Callao"})

        names = [p["nombre_proveedor"] for p in client.get("/api/providers").json()]
        assert names == ["Autopartes Callao", "Importadora Andina"]


class TestProducts:
    """/api/products"""

    def test_crea_producto_con_registros_relacionados(self, client, db_session, category, provider):
        response = client.post("/api/products", json={
            "codigo_producto": "FR-0100",
            "descripcion": "Disco de freno ventilado",
            "id_categoria": category.id_categoria,
            "id_proveedor": provider.id_proveedor,
            "precio_compra": "80.00",
            "stock": 12,
            "imagen_ruta_archivo": "/img/fr-0100.jpg",
            "imagenes": [{"ruta_archivo": "/img/fr-0100-b.jpg"}],
            "precio_venta": "120.00",
            "porcentaje_margen": "50",
        })

        assert response.status_code == 201
        data = response.json()
        assert len(data["importaciones"]) == 1
        assert data["importaciones"][0]["stock"] == 12
        assert [i["orden_visualizacion"] for i in data["imagenes"]] == [1, 2]
        assert Decimal(data["porcentajes_venta"][0]["precio_venta"]) == Decimal("120.00")
        assert data["categoria"]["nombre_categoria"] == "Frenos"

    def test_sin_importacion_si_falta_stock(self, client, category, provider):
        response = client.post("/api/products", json={
            "codigo_producto": "FR-0101",
            "descripcion": "Líquido de frenos",
            "id_categoria": category.id_categoria,
            "id_proveedor": provider.id_proveedor,
            "precio_compra": "15.00",
        })

        assert response.status_code == 201
        assert response.json()["importaciones"] == []
        assert response.json()["imagenes"] == []
        assert response.json()["porcentajes_venta"] == []

    def test_codigo_duplicado(self, client, product, category):
        response = client.post("/api/products", json={
            "codigo_producto": "FR-0001", "descripcion": "Otra", "id_categoria": category.id_categoria
        })
        assert response.status_code == 409

    def test_categoria_inexistente(self, client):
        response = client.post("/api/products", json={
            "codigo_producto": "X-1", "descripcion": "Sin categoría", "id_categoria": 999
        })
        assert response.status_code == 404

    def test_proveedor_inexistente_no_deja_producto(self, client, db_session, category):
        response = client.post("/api/products", json={
            "codigo_producto": "FR-0200",
            "descripcion": "Zapatas",
            "id_categoria": category.id_categoria,
            "id_proveedor": 999,
            "precio_compra": "10.00",
            "stock": 1,
        })

        assert response.status_code == 404
        assert db_session.query(Producto).count() == 0

    def test_lista_y_detalle(self, client, product):
        assert [p["codigo_producto"] for p in client.get("/api/products").json()] == ["FR-0001"]

        detail = client.get(f"/api/products/{product.id_producto}")
        assert detail.status_code == 200
        assert detail.json()["categoria"]["nombre_categoria"] == "Frenos"

    def test_actualiza_producto(self, client, product):
        response = client.put(f"/api/products/{product.id_producto}", json={"descripcion": "Pastillas cerámicas"})
        assert response.status_code == 200
        assert response.json()["descripcion"] == "Pastillas cerámicas"

    def test_elimina_en_cascada(self, client, db_session, category, provider):
        product_id = client.post("/api/products", json={
            "codigo_producto": "FR-0300",
            "descripcion": "Kit de frenos",
            "id_categoria": category.id_categoria,
            "id_proveedor": provider.id_proveedor,
            "precio_compra": "50.00",
            "stock": 3,
            "imagen_ruta_archivo": "/img/kit.jpg",
            "precio_venta": "75.00",
        }).json()["id_producto"]

        assert client.delete(f"/api/products/{product_id}").status_code == 200
        assert db_session.query(Producto).count() == 0
        assert db_session.query(ProductoImportacion).count() == 0
        assert db_session.query(ProductoImagen).count() == 0
        assert db_session.query(ProductoPorcentajeVenta).count() == 0

    def test_no_elimina_producto_vendido(self, client, db_session, make_order, product):
        product_id = product.id_producto
        make_order()

        response = client.delete(f"/api/products/{product_id}")

        assert response.status_code == 409
        db_session.expire_all()
        assert db_session.get(Producto, product_id) is not None

    def test_producto_inexistente(self, client):
        response = client.get("/api/products/999")
        assert response.status_code == 404
        assert response.json() == {"error": "Producto no encontrado"}
