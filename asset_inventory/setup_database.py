"""Create the assets table when it does not exist yet.

Usage:
    python -m asset_inventory.setup_database
"""

import logging
import sys

from sqlalchemy import inspect
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from asset_inventory.config import settings
from asset_inventory.database import Base, create_db_engine
from asset_inventory.models.asset import Asset

logger = logging.getLogger(__name__)


def setup_database(engine: Engine) -> bool:
    """Create the assets table if missing.

    Args:
        engine: Engine connected to the target database

    Returns:
        bool: True if the table was created, False if it already existed
    """
    if inspect(engine).has_table(Asset.__tablename__):
        logger.info("Assets table already exists")
        return False

    logger.info("Creating assets table...")
    Base.metadata.create_all(bind=engine, tables=[Asset.__table__])
    logger.info("Assets table created successfully")
    return True


def main() -> int:
    logging.basicConfig(level=settings.log_level, format="%(levelname)s - %(message)s")
    engine = create_db_engine(settings.database_url)
    try:
        setup_database(engine)
    except SQLAlchemyError as e:
        logger.error(f"Database setup failed: {e}")
        return 1
    finally:
        engine.dispose()
    logger.info("Database setup completed successfully")
    return 0


if __name__ == "__main__":
    sys.exit(main())
