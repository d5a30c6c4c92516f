from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
import logging

# Import database components
from app.database.database import sync_engine, Base

# Import middleware and error handlers
from app.common.middleware import RequestLoggingMiddleware, SecurityHeadersMiddleware
from app.common.errors import register_exception_handlers

# Import routers
from app.modules.auth.router import auth_router
from app.modules.users.router import users_router, roles_router
from app.modules.clients.router import clients_router
from app.modules.providers.router import providers_router
from app.modules.categories.router import categories_router
from app.modules.products.router import product_router
from app.modules.orders.router import orders_router
from app.modules.returns.router import returns_router
from app.modules.finances.router import finances_router
from app.modules.notifications.router import notifications_router
from app.modules.reports import reports_router

# Import models for table creation
import app.modules.users.models
import app.modules.clients.models
import app.modules.providers.models
import app.modules.categories.models
import app.modules.products.models
import app.modules.orders.models
import app.modules.returns.models
import app.modules.finances.models
import app.modules.notifications.models

from app.core.config import settings

# Configure logging
logging.basicConfig(
    level=logging.INFO if settings.ENVIRONMENT == "production" else logging.DEBUG,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

# FastAPI app
app = FastAPI(
    title="Rey Automotriz API",
    description="API de gestión comercial: clientes, productos, pedidos, devoluciones, finanzas y notificaciones",
    version="1.0.0",
    docs_url="/docs" if settings.ENVIRONMENT != "production" else None,
    redoc_url="/redoc" if settings.ENVIRONMENT != "production" else None
)

register_exception_handlers(app)

# Add middleware (order matters!)
app.add_middleware(GZipMiddleware, minimum_size=1000)
app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(RequestLoggingMiddleware)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(auth_router, prefix="/api/auth", tags=["Auth"])
app.include_router(users_router, prefix="/api/users")
app.include_router(roles_router, prefix="/api/roles")
app.include_router(clients_router, prefix="/api/clients")
app.include_router(providers_router, prefix="/api/providers")
app.include_router(categories_router, prefix="/api/categories")
app.include_router(product_router, prefix="/api/products")
app.include_router(orders_router, prefix="/api/orders")
app.include_router(returns_router, prefix="/api/returns")
app.include_router(finances_router, prefix="/api/finances")
app.include_router(notifications_router, prefix="/api/notifications")
app.include_router(reports_router, prefix="/api/reports")

# Create database tables (only for development - use migrations in production)
if settings.ENVIRONMENT == "development":
    Base.metadata.create_all(bind=sync_engine)

@app.get("/")
async def read_root():
    return {
        "message": "Rey Automotriz API is running",
        "version": "1.0.0",
        "environment": settings.ENVIRONMENT
    }

@app.get("/health")
async def health_check():
    return {"status": "healthy", "environment": settings.ENVIRONMENT}

@app.on_event("startup")
async def startup_event():
    logger.info("Rey Automotriz API starting up...")
    logger.info(f"Environment: {settings.ENVIRONMENT}")
    logger.info(f"Debug mode: {settings.DEBUG}")

@app.on_event("shutdown")
async def shutdown_event():
    logger.info("Rey Automotriz API shutting down...")
