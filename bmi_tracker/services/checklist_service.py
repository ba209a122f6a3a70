"""
Checklist service - SQL for the `meal_checklist` table
"""
import datetime
from typing import List
from sqlalchemy import Boolean, Date, Integer, String, bindparam, text
from sqlalchemy.ext.asyncio import AsyncSession

from bmi_tracker.models.schemas import ChecklistEntry


SELECT_DAY = text(
    "SELECT id, date, item, checked FROM meal_checklist WHERE date = :date"
).bindparams(
    bindparam("date", type_=Date),
).columns(id=Integer, date=Date, item=String, checked=Boolean)

SELECT_ITEM_ID = text(
    "SELECT id FROM meal_checklist WHERE date = :date AND item = :item"
).bindparams(bindparam("date", type_=Date), bindparam("item", type_=String))

DELETE_ITEM = text(
    "DELETE FROM meal_checklist WHERE date = :date AND item = :item"
).bindparams(bindparam("date", type_=Date), bindparam("item", type_=String))

# Upsert keyed by the (date, item) unique constraint; only `checked` is overwritten
_UPSERT_MYSQL = """
    INSERT INTO meal_checklist (date, item, checked)
    VALUES (:date, :item, :checked)
    ON DUPLICATE KEY UPDATE checked = VALUES(checked)
"""

_UPSERT_ON_CONFLICT = """
    INSERT INTO meal_checklist (date, item, checked)
    VALUES (:date, :item, :checked)
    ON CONFLICT (date, item) DO UPDATE SET checked = EXCLUDED.checked
"""


def upsert_statement(dialect_name: str):
    """Native upsert for the connected dialect."""
    sql = _UPSERT_MYSQL if dialect_name in ("mysql", "mariadb") else _UPSERT_ON_CONFLICT
    return text(sql).bindparams(
        bindparam("date", type_=Date),
        bindparam("item", type_=String),
        bindparam("checked", type_=Boolean),
    )


class ChecklistService:
    """Service for the daily meal checklist"""

    @staticmethod
    async def list_day(session: AsyncSession, day: datetime.date) -> List[ChecklistEntry]:
        """
        Checklist rows for one day, in the store's natural order

        Args:
            session: Database session
            day: The day to read (callers pass today)

        Returns:
            Entries for that day
        """
        result = await session.execute(SELECT_DAY, {"date": day})
        return [
            ChecklistEntry(id=row.id, date=row.date, item=row.item, checked=row.checked)
            for row in result
        ]

    @staticmethod
    async def upsert_item(session: AsyncSession, day: datetime.date, item: str, checked: bool) -> ChecklistEntry:
        """
        Insert an item for the day, or overwrite its `checked` flag

        Args:
            session: Database session
            day: Entry date
            item: Item label
            checked: New checked state

        Returns:
            The stored entry, id included
        """
        params = {"date": day, "item": item, "checked": checked}
        await session.execute(upsert_statement(session.get_bind().dialect.name), params)

        # Same transaction, so this sees the row just written
        result = await session.execute(SELECT_ITEM_ID, {"date": day, "item": item})
        return ChecklistEntry(id=result.scalar_one(), date=day, item=item, checked=checked)

    @staticmethod
    async def delete_item(session: AsyncSession, day: datetime.date, item: str) -> None:
        """
        Delete an item for the day; a missing item is not an error

        Args:
            session: Database session
            day: Entry date
            item: Item label
        """
        await session.execute(DELETE_ITEM, {"date": day, "item": item})
