"""
Daily meal checklist endpoints.

Every operation is scoped to the server's current date; earlier days are
kept in the store but never served.
"""
import datetime
from typing import List, Optional
from fastapi import APIRouter, Query, Response

from bmi_tracker.database.queries import store_session
from bmi_tracker.models.schemas import ChecklistEntry, ChecklistPayload, MessageResponse
from bmi_tracker.services.checklist_service import ChecklistService
from bmi_tracker.utils.validators import require_param

router = APIRouter()


@router.get("/checklist", response_model=List[ChecklistEntry])
async def list_checklist():
    """Today's checklist"""
    today = datetime.date.today()
    async with store_session() as session:
        return await ChecklistService.list_day(session, today)


@router.post("/checklist", response_model=ChecklistEntry, status_code=201)
async def upsert_checklist(payload: ChecklistPayload):
    """Check or uncheck an item for today, creating it if needed"""
    today = datetime.date.today()
    async with store_session() as session:
        return await ChecklistService.upsert_item(session, today, payload.item, payload.checked)


@router.delete("/checklist", response_model=MessageResponse)
async def delete_checklist(item: Optional[str] = Query(None, description="Item label")):
    item = require_param(item, "item")
    today = datetime.date.today()
    async with store_session() as session:
        await ChecklistService.delete_item(session, today, item)
    return MessageResponse(message="deleted")


@router.options("/checklist")
async def checklist_preflight():
    return Response(status_code=200)
