#!/usr/bin/env python3
"""
Migraciones del esquema de Rey Automotriz con Alembic.

Uso:
    python migrate.py create "mensaje"   # Autogenerar migración desde los modelos
    python migrate.py upgrade [rev]      # Aplicar hasta 'head' o la revisión indicada
    python migrate.py downgrade [rev]    # Revertir hasta '-1' o la revisión indicada
    python migrate.py history
    python migrate.py current
"""
import logging
import sys
from pathlib import Path

root_dir = Path(__file__).parent
sys.path.insert(0, str(root_dir))

from alembic.config import Config
from alembic import command
from app.core.config import settings

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
logger = logging.getLogger("migrate")


def get_alembic_config() -> Config:
    alembic_cfg = Config(str(root_dir / "alembic.ini"))
    alembic_cfg.set_main_option("script_location", str(root_dir / "alembic"))
    alembic_cfg.set_main_option("sqlalchemy.url", settings.database_url)
    return alembic_cfg


def create_migration(cfg: Config, args):
    if not args:
        raise SystemExit("Error: se requiere un mensaje para la migración")
    command.revision(cfg, autogenerate=True, message=args[0])
    logger.info(f"Migración creada: {args[0]}")


def upgrade(cfg: Config, args):
    revision = args[0] if args else "head"
    command.upgrade(cfg, revision)
    logger.info(f"Esquema actualizado a {revision}")


def downgrade(cfg: Config, args):
    revision = args[0] if args else "-1"
    command.downgrade(cfg, revision)
    logger.info(f"Esquema revertido a {revision}")


COMMANDS = {
    "create": create_migration,
    "upgrade": upgrade,
    "downgrade": downgrade,
    "history": lambda cfg, args: command.history(cfg),
    "current": lambda cfg, args: command.current(cfg),
}


if __name__ == "__main__":
    if len(sys.argv) < 2 or sys.argv[1] not in COMMANDS:
        print(__doc__)
        sys.exit(1)

    COMMANDS[sys.argv[1]](get_alembic_config(), sys.argv[2:])
