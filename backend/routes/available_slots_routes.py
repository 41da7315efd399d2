import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status
from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from backend.database import DATABASE_UNAVAILABLE_DETAIL, ensure_scheduling_indexes, get_db
from backend.scheduling.exceptions import InvalidRequest, ServiceNotFound, UpstreamFailure
from backend.scheduling.repository import build_slot_aggregator

router = APIRouter(tags=['available-slots'])

logger = logging.getLogger(__name__)


class SlotStatResponse(BaseModel):
    time: str
    capacity: int
    booked: int
    available: int

    class Config:
        from_attributes = True


def ensure_database_ready() -> None:
    try:
        ensure_scheduling_indexes()
    except SQLAlchemyError as exc:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=DATABASE_UNAVAILABLE_DETAIL,
        ) from exc


@router.get('', response_model=list[SlotStatResponse])
def get_available_slots(
    clinic_id: str | None = Query(default=None),
    service_id: str | None = Query(default=None),
    date: str | None = Query(default=None),
    db: Session = Depends(get_db),
):
    ensure_database_ready()

    aggregator = build_slot_aggregator(db)
    try:
        slots = aggregator.compute_available_slots(clinic_id, service_id, date)
    except InvalidRequest as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except ServiceNotFound as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except UpstreamFailure as exc:
        logger.exception('Available slots lookup failed for clinic=%s service=%s date=%s', clinic_id, service_id, date)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=DATABASE_UNAVAILABLE_DETAIL,
        ) from exc

    return [SlotStatResponse(**slot.to_dict()) for slot in slots]
