"""
Weight service - SQL for the `weights` table
"""
import datetime
import logging
from typing import List
from sqlalchemy import Date, Float, Integer, bindparam, text
from sqlalchemy.ext.asyncio import AsyncSession

from bmi_tracker.models.schemas import WeightEntry

logger = logging.getLogger(__name__)


SELECT_WEIGHTS = text(
    "SELECT id, date, value FROM weights ORDER BY date, id"
).columns(id=Integer, date=Date, value=Float)

INSERT_WEIGHT = text(
    "INSERT INTO weights (date, value) VALUES (:date, :value)"
).bindparams(bindparam("date", type_=Date), bindparam("value", type_=Float))

INSERT_WEIGHT_RETURNING = text(
    "INSERT INTO weights (date, value) VALUES (:date, :value) RETURNING id"
).bindparams(bindparam("date", type_=Date), bindparam("value", type_=Float))

DELETE_WEIGHT = text(
    "DELETE FROM weights WHERE id = :id"
).bindparams(bindparam("id", type_=Integer))


class WeightService:
    """Service for weight entries"""

    @staticmethod
    async def list_weights(session: AsyncSession) -> List[WeightEntry]:
        """
        All weight entries, oldest date first

        Args:
            session: Database session

        Returns:
            Entries ordered by date (then id)
        """
        result = await session.execute(SELECT_WEIGHTS)
        return [
            WeightEntry(id=row.id, date=row.date, value=row.value)
            for row in result
        ]

    @staticmethod
    async def add_weight(session: AsyncSession, entry_date: datetime.date, value: float) -> WeightEntry:
        """
        Insert a weight entry

        Args:
            session: Database session
            entry_date: Measurement date
            value: Measured weight

        Returns:
            The stored entry with its generated id
        """
        params = {"date": entry_date, "value": value}
        if session.get_bind().dialect.name == "postgresql":
            result = await session.execute(INSERT_WEIGHT_RETURNING, params)
            new_id = result.scalar_one()
        else:
            result = await session.execute(INSERT_WEIGHT, params)
            new_id = result.lastrowid

        logger.debug("Inserted weight %s on %s", new_id, entry_date)
        return WeightEntry(id=new_id, date=entry_date, value=value)

    @staticmethod
    async def delete_weight(session: AsyncSession, weight_id: int) -> None:
        """
        Delete a weight entry by id; deleting a missing id is not an error

        Args:
            session: Database session
            weight_id: Entry id
        """
        await session.execute(DELETE_WEIGHT, {"id": weight_id})
