"""
Table bootstrap for the two resources.

Only creates missing tables; altering existing ones is left to the operator.
"""
import logging
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine

logger = logging.getLogger(__name__)


SCHEMA = {
    "mysql": [
        """
        CREATE TABLE IF NOT EXISTS weights (
            id INT AUTO_INCREMENT PRIMARY KEY,
            date DATE NOT NULL,
            value DOUBLE NOT NULL
        )
        """,
        """
        CREATE TABLE IF NOT EXISTS meal_checklist (
            id INT AUTO_INCREMENT PRIMARY KEY,
            date DATE NOT NULL,
            item VARCHAR(255) NOT NULL,
            checked BOOLEAN NOT NULL DEFAULT FALSE,
            UNIQUE KEY uq_meal_checklist_date_item (date, item)
        )
        """,
    ],
    "postgresql": [
        """
        CREATE TABLE IF NOT EXISTS weights (
            id SERIAL PRIMARY KEY,
            date DATE NOT NULL,
            value DOUBLE PRECISION NOT NULL
        )
        """,
        """
        CREATE TABLE IF NOT EXISTS meal_checklist (
            id SERIAL PRIMARY KEY,
            date DATE NOT NULL,
            item VARCHAR(255) NOT NULL,
            checked BOOLEAN NOT NULL DEFAULT FALSE,
            CONSTRAINT uq_meal_checklist_date_item UNIQUE (date, item)
        )
        """,
    ],
    "sqlite": [
        """
        CREATE TABLE IF NOT EXISTS weights (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            date DATE NOT NULL,
            value REAL NOT NULL
        )
        """,
        """
        CREATE TABLE IF NOT EXISTS meal_checklist (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            date DATE NOT NULL,
            item TEXT NOT NULL,
            checked BOOLEAN NOT NULL DEFAULT 0,
            UNIQUE (date, item)
        )
        """,
    ],
}


async def ensure_schema(engine: AsyncEngine) -> None:
    """Create `weights` and `meal_checklist` if they do not exist."""
    dialect = engine.dialect.name
    statements = SCHEMA.get(dialect)
    if statements is None:
        raise RuntimeError(f"No schema for dialect {dialect!r}")

    async with engine.begin() as conn:
        for statement in statements:
            await conn.execute(text(statement))
    logger.info("Schema ensured for %s", dialect)
