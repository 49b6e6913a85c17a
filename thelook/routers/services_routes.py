# thelook/routers/services_routes.py

from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends
from sqlmodel import Session, select

from thelook.db import get_session
from thelook.models import Booking, Service
from thelook.schemas import ServicePublic, ServiceSpecialty

router = APIRouter(
    tags=["services"],
)


def remaining_slots(slots: List[str], taken: List[str]) -> List[str]:
    """Slots not yet taken, in catalog order."""
    taken_set = set(taken)
    return [slot for slot in slots if slot not in taken_set]


@router.get("/services", response_model=List[ServicePublic])
def list_services(
    date: Optional[date] = None,
    session: Session = Depends(get_session),
):
    services = session.exec(select(Service).order_by(Service.id)).all()
    if date is None:
        return services

    bookings = session.exec(select(Booking).where(Booking.date == date).order_by(Booking.id)).all()

    available = []
    for service in services:
        taken = [b.slot for b in bookings if b.service_name == service.name]
        available.append({
            "id": service.id,
            "name": service.name,
            "price": service.price,
            "slots": remaining_slots(service.slots, taken),
        })
    return available


@router.get("/services/{service_id}", response_model=Optional[ServicePublic])
def get_service(
    service_id: int,
    session: Session = Depends(get_session),
):
    # absent -> null body, no 404
    return session.get(Service, service_id)


@router.get("/serviceSpecialty", response_model=List[ServiceSpecialty])
def list_service_specialties(session: Session = Depends(get_session)):
    rows = session.exec(select(Service.id, Service.name).order_by(Service.id)).all()
    return [{"id": service_id, "name": name} for service_id, name in rows]
