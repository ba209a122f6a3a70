"""
Weight entry endpoints
"""
import datetime
from typing import List, Optional
from fastapi import APIRouter, Query, Response

from bmi_tracker.database.queries import store_session
from bmi_tracker.models.schemas import MessageResponse, WeightEntry, WeightPayload
from bmi_tracker.services.weight_service import WeightService
from bmi_tracker.utils.validators import parse_weight_id

router = APIRouter()


@router.get("/weights", response_model=List[WeightEntry])
async def list_weights():
    """All weight entries, ordered by date"""
    async with store_session() as session:
        return await WeightService.list_weights(session)


@router.post("/weights", response_model=WeightEntry, status_code=201)
async def add_weight(payload: WeightPayload):
    """Store a weight entry; date defaults to today"""
    entry_date = payload.date or datetime.date.today()
    async with store_session() as session:
        return await WeightService.add_weight(session, entry_date, payload.value)


@router.delete("/weights", response_model=MessageResponse)
async def delete_weight(id: Optional[str] = Query(None, description="Weight entry id")):
    weight_id = parse_weight_id(id)
    async with store_session() as session:
        await WeightService.delete_weight(session, weight_id)
    return MessageResponse(message="Data deleted")


@router.options("/weights")
async def weights_preflight():
    return Response(status_code=200)
