"""
Fixtures compartidas

La base de datos es SQLite en memoria sobre el engine de la aplicación;
las tablas se crean antes de cada test y se eliminan al terminar.
"""
import os

os.environ["ENVIRONMENT"] = "test"
os.environ["DATABASE_URL"] = "sqlite://"

from datetime import date
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.database.database import Base, SessionLocal, sync_engine
from app.modules.auth.utils import hash_password
from app.modules.categories.models import CategoriaProducto
from app.modules.clients.models import Cliente
from app.modules.orders.models import Pedido, PedidoDetalle, PedidoPago
from app.modules.products.models import Producto
from app.modules.users.models import Role, Usuario

SELLER_PASSWORD = "Vendedor!2025"


@pytest.fixture(autouse=True)
def _schema():
    Base.metadata.create_all(bind=sync_engine)
    yield
    Base.metadata.drop_all(bind=sync_engine)


@pytest.fixture
def db_session():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


# ===== DATOS BASE =====

@pytest.fixture
def role(db_session):
    role = Role(nombre_rol="vendedor", descripcion="Gestión de pedidos")
    db_session.add(role)
    db_session.commit()
    return role


@pytest.fixture
def seller(db_session, role):
    user = Usuario(
        correo_electronico="vendedor@reyautomotriz.pe",
        contrasena_hash=hash_password(SELLER_PASSWORD),
        nombre_completo="Carlos Vendedor",
        id_rol=role.id_rol,
        estado="activo",
    )
    db_session.add(user)
    db_session.commit()
    return user


@pytest.fixture
def customer(db_session, seller):
    cliente = Cliente(
        id_vendedor_asignado=seller.id_usuario,
        razon_social="Taller El Pistón S.A.C.",
        nombre_completo="Taller El Pistón",
        ruc="20123456789",
        correo_electronico="contacto@elpiston.pe",
        tipo_cliente="regular",
        estado="activo",
    )
    db_session.add(cliente)
    db_session.commit()
    return cliente


@pytest.fixture
def category(db_session):
    categoria = CategoriaProducto(nombre_categoria="Frenos", porcentaje_alerta_stock=Decimal("10"))
    db_session.add(categoria)
    db_session.commit()
    return categoria


@pytest.fixture
def product(db_session, category):
    producto = Producto(
        codigo_producto="FR-0001",
        descripcion="Pastillas de freno delanteras",
        id_categoria=category.id_categoria,
        estado="activo",
    )
    db_session.add(producto)
    db_session.commit()
    return producto


@pytest.fixture
def order_payload(customer, seller, product):
    return {
        "id_cliente": customer.id_cliente,
        "id_vendedor": seller.id_usuario,
        "tipo_pago": "credito",
        "tipo_comprobante": "factura",
        "items": [
            {"id_producto": product.id_producto, "cantidad": 2, "precio_unitario": "10.00"},
            {"id_producto": product.id_producto, "cantidad": 1, "precio_unitario": "5.00"},
        ],
    }


@pytest.fixture
def make_order(db_session, customer, seller, product):
    """Crea un pedido directamente en la base con cuotas opcionales"""
    def _make(total="118.00", installments=(), id_cliente=None, id_vendedor=None):
        total = Decimal(total)
        subtotal = (total / Decimal("1.18")).quantize(Decimal("0.01"))
        pedido = Pedido(
            id_cliente=id_cliente or customer.id_cliente,
            id_vendedor=id_vendedor or seller.id_usuario,
            tipo_pago="credito" if installments else "contado",
            tipo_comprobante="boleta",
            subtotal=subtotal,
            igv=total - subtotal,
            total=total,
        )
        pedido.detalles.append(PedidoDetalle(
            id_producto=product.id_producto, cantidad=1, precio_unitario=subtotal, subtotal=subtotal
        ))
        for numero, (monto, pagado, fecha) in enumerate(installments, start=1):
            monto, pagado = Decimal(monto), Decimal(pagado)
            pedido.pagos.append(PedidoPago(
                numero_cuota=numero,
                monto_cuota=monto,
                monto_pagado=pagado,
                saldo_pendiente=monto - pagado,
                fecha_pago_programada=fecha,
                estado_pago="pagado" if pagado == monto else "pendiente",
            ))
        db_session.add(pedido)
        db_session.commit()
        return pedido
    return _make


@pytest.fixture
def today():
    return date.today()
