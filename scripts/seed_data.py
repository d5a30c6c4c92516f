"""
Seed script: datos de demostración para Rey Automotriz.

Qué crea:
- Roles administrador y vendedor.
- Usuario administrador (activo) y vendedores.
- Árbol de categorías de autopartes y proveedores.
- Productos con importación y precio de venta.
- Categorías financieras de ingreso y egreso.
- Clientes y pedidos de ejemplo (totales calculados por OrderService).

Ejecutar dentro del contenedor de la API:
    docker compose exec api python scripts/seed_data.py \
        --email admin@reyautomotriz.pe --password ReyAdmin!2025 \
        --products 60 --orders 40

Solo para entornos de desarrollo.
"""

# Add project root to sys.path so `app.*` imports work even if CWD changes
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

import argparse
import random
from datetime import date, timedelta
from decimal import Decimal

from app.database.database import SessionLocal
from app.main import app  # noqa: F401  registra todos los modelos
from app.modules.auth.utils import hash_password
from app.modules.users.models import Role, Usuario
from app.modules.clients.models import Cliente
from app.modules.providers.models import Proveedor
from app.modules.categories.models import CategoriaProducto
from app.modules.products.service import ProductService
from app.modules.products.schemas import ProductCreate
from app.modules.products.models import Producto
from app.modules.finances.models import CategoriaFinanciera
from app.modules.orders.service import OrderService
from app.modules.orders.schemas import OrderCreate, InstallmentCreate

CATEGORY_TREE = {
    "Motor": ["Filtros", "Bujías", "Correas"],
    "Frenos": ["Pastillas", "Discos"],
    "Suspensión": ["Amortiguadores", "Rótulas"],
    "Eléctrico": ["Baterías", "Focos"],
}

FINANCE_CATEGORIES = [
    ("Ventas", "ingreso"),
    ("Cobranza de créditos", "ingreso"),
    ("Importaciones", "egreso"),
    ("Planilla", "egreso"),
    ("Servicios", "egreso"),
]


def get_or_create(db, model, defaults=None, **filters):
    instance = db.query(model).filter_by(**filters).first()
    if instance:
        return instance
    instance = model(**filters, **(defaults or {}))
    db.add(instance)
    db.flush()
    return instance


def create_roles(db):
    admin = get_or_create(db, Role, nombre_rol="administrador", defaults={"descripcion": "Acceso total"})
    seller = get_or_create(db, Role, nombre_rol="vendedor", defaults={"descripcion": "Gestión de pedidos"})
    db.commit()
    return admin, seller


def create_user(db, email: str, password: str, name: str, role: Role):
    return get_or_create(
        db, Usuario,
        correo_electronico=email.lower(),
        defaults={
            "contrasena_hash": hash_password(password),
            "nombre_completo": name,
            "id_rol": role.id_rol,
            "estado": "activo",
        }
    )


def create_sellers(db, role: Role, count: int = 3):
    sellers = [
        create_user(db, f"vendedor{i}@reyautomotriz.pe", "Vendedor!2025", f"Vendedor {i}", role)
        for i in range(1, count + 1)
    ]
    db.commit()
    return sellers


def create_categories(db):
    leaves = []
    for parent_name, children in CATEGORY_TREE.items():
        parent = get_or_create(db, CategoriaProducto, nombre_categoria=parent_name)
        for child in children:
            leaves.append(get_or_create(
                db, CategoriaProducto,
                nombre_categoria=child,
                defaults={"id_categoria_padre": parent.id_categoria}
            ))
    db.commit()
    return leaves


def create_providers(db, count: int = 5):
    providers = [
        get_or_create(
            db, Proveedor,
            nombre_proveedor=f"Importadora {name}",
            defaults={"ruc": f"20{random.randint(100000000, 999999999)}", "estado": "activo"}
        )
        for name in ("Andina", "Pacífico", "Oriental", "Lima Parts", "Motorex")[:count]
    ]
    db.commit()
    return providers


def create_products(db, categories, providers, count: int):
    service = ProductService(db)
    products = []
    for idx in range(1, count + 1):
        code = f"RA-{idx:05d}"
        existing = db.query(Producto).filter(Producto.codigo_producto == code).first()
        if existing:
            products.append(existing)
            continue
        category = random.choice(categories)
        purchase = Decimal(random.randint(20, 400))
        products.append(service.create_product(ProductCreate(
            codigo_producto=code,
            descripcion=f"{category.nombre_categoria} modelo {idx}",
            id_categoria=category.id_categoria,
            id_proveedor=random.choice(providers).id_proveedor,
            precio_compra=purchase,
            stock=random.randint(5, 200),
            precio_venta=(purchase * Decimal("1.35")).quantize(Decimal("0.01")),
            porcentaje_margen=Decimal("35.00"),
        )))
    return products


def create_finance_categories(db):
    for name, tipo in FINANCE_CATEGORIES:
        get_or_create(db, CategoriaFinanciera, nombre_categoria=name, defaults={"tipo_categoria": tipo})
    db.commit()


def create_clients(db, sellers, count: int = 20):
    clients = []
    for idx in range(1, count + 1):
        clients.append(get_or_create(
            db, Cliente,
            correo_electronico=f"cliente{idx}@correo.pe",
            defaults={
                "razon_social": f"Taller Mecánico {idx} S.A.C.",
                "nombre_completo": f"Taller Mecánico {idx}",
                "ruc": f"20{random.randint(100000000, 999999999)}",
                "tipo_cliente": random.choice(["regular", "vip"]),
                "id_vendedor_asignado": random.choice(sellers).id_usuario,
                "estado": "activo",
            }
        ))
    db.commit()
    return clients


def create_orders(db, clients, sellers, products, count: int):
    service = OrderService(db)
    created = 0
    for _ in range(count):
        items = [
            {
                "id_producto": product.id_producto,
                "cantidad": random.randint(1, 6),
                "precio_unitario": Decimal(random.randint(30, 600)),
            }
            for product in random.sample(products, k=min(len(products), random.randint(1, 4)))
        ]
        tipo_pago = random.choice(["contado", "credito"])
        order = service.create_order(OrderCreate(
            id_cliente=random.choice(clients).id_cliente,
            id_vendedor=random.choice(sellers).id_usuario,
            tipo_pago=tipo_pago,
            tipo_comprobante=random.choice(["boleta", "factura"]),
            items=items,
        ))
        if tipo_pago == "credito":
            cuota = (order.total / 2).quantize(Decimal("0.01"))
            for numero in (1, 2):
                service.add_installment(order.id_pedido, InstallmentCreate(
                    numero_cuota=numero,
                    monto_cuota=cuota if numero == 1 else order.total - cuota,
                    fecha_pago_programada=date.today() + timedelta(days=30 * numero - 45),
                ))
        created += 1
    return created


def main():
    parser = argparse.ArgumentParser(description="Seed Rey Automotriz demo data")
    parser.add_argument("--email", default="admin@reyautomotriz.pe")
    parser.add_argument("--password", default="ReyAdmin!2025")
    parser.add_argument("--products", type=int, default=60)
    parser.add_argument("--clients", type=int, default=20)
    parser.add_argument("--orders", type=int, default=40)
    args = parser.parse_args()

    db = SessionLocal()
    try:
        admin_role, seller_role = create_roles(db)
        create_user(db, args.email, args.password, "Administrador", admin_role)
        db.commit()
        sellers = create_sellers(db, seller_role)

        print("Creating categories and providers...")
        categories = create_categories(db)
        providers = create_providers(db)
        create_finance_categories(db)

        print("Creating products...")
        products = create_products(db, categories, providers, args.products)
        print(f"Products: {len(products)}")

        print("Creating clients and orders...")
        clients = create_clients(db, sellers, args.clients)
        orders_created = create_orders(db, clients, sellers, products, args.orders)
        print(f"Clients: {len(clients)}, Orders created: {orders_created}")

        print("\nSeed completed.")
        print("Login credentials:")
        print(f"  Email:    {args.email}")
        print(f"  Password: {args.password}")
    finally:
        db.close()


if __name__ == "__main__":
    main()
