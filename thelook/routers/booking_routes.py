# thelook/routers/booking_routes.py

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends
from sqlmodel import Session, select

from thelook.auth import verify_token
from thelook.db import get_session
from thelook.models import Booking
from thelook.schemas import BookingCreate, BookingPublic, InsertResult

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/booking",
    tags=["booking"],
)


@router.post("", response_model=InsertResult, response_model_exclude_none=True)
def create_booking(
    booking: BookingCreate,
    session: Session = Depends(get_session),
):
    # 1) One booking per (date, email, service); checked, not locked
    existing = session.exec(
        select(Booking)
        .where(Booking.date == booking.date)
        .where(Booking.email == booking.email)
        .where(Booking.service_name == booking.service_name)
    ).first()
    if existing is not None:
        logger.info(
            "Duplicate booking for %s on %s (%s)",
            booking.email, booking.date, booking.service_name,
        )
        message = f"already have a booking on {booking.date.isoformat()}"
        return InsertResult(acknowledged=False, message=message)

    # 2) Insert
    db_booking = Booking(**booking.model_dump())
    session.add(db_booking)
    session.commit()
    session.refresh(db_booking)

    logger.info("Created booking %s for %s", db_booking.id, db_booking.email)
    return InsertResult(inserted_id=db_booking.id)


# Any authenticated caller may read any email's bookings
@router.get("", response_model=List[BookingPublic])
def list_bookings(
    email: str,
    session: Session = Depends(get_session),
    _: str = Depends(verify_token),
):
    return session.exec(
        select(Booking).where(Booking.email == email).order_by(Booking.id)
    ).all()


@router.get("/{booking_id}", response_model=Optional[BookingPublic])
def get_booking(
    booking_id: int,
    session: Session = Depends(get_session),
    _: str = Depends(verify_token),
):
    return session.get(Booking, booking_id)
