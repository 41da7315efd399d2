from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from backend.database import DATABASE_UNAVAILABLE_DETAIL, get_db
from backend.models.clinic import Clinic
from backend.models.service import Service

router = APIRouter(tags=['catalog'])


class CatalogItemResponse(BaseModel):
    id: str
    name: str

    class Config:
        from_attributes = True


@router.get('/clinics', response_model=list[CatalogItemResponse])
def list_clinics(db: Session = Depends(get_db)):
    try:
        clinics = db.query(Clinic.id, Clinic.name).order_by(Clinic.name.asc()).all()
        return [CatalogItemResponse(id=clinic.id, name=clinic.name) for clinic in clinics]
    except SQLAlchemyError as exc:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=DATABASE_UNAVAILABLE_DETAIL,
        ) from exc


@router.get('/services', response_model=list[CatalogItemResponse])
def list_services(db: Session = Depends(get_db)):
    try:
        services = db.query(Service.id, Service.name).order_by(Service.name.asc()).all()
        return [CatalogItemResponse(id=service.id, name=service.name) for service in services]
    except SQLAlchemyError as exc:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=DATABASE_UNAVAILABLE_DETAIL,
        ) from exc
