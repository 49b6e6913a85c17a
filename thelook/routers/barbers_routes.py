# thelook/routers/barbers_routes.py

import logging
from typing import List

from fastapi import APIRouter, Depends
from sqlmodel import Session, select

from thelook.db import get_session
from thelook.deps import verify_admin
from thelook.models import Barber
from thelook.schemas import BarberCreate, BarberPublic, DeleteResult, InsertResult

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/barber",
    tags=["barbers"],
    dependencies=[Depends(verify_admin)],
)

KNOWN_FIELDS = ("name", "email", "specialty", "image")


def barber_to_dict(barber: Barber) -> dict:
    # profile extras are returned next to the known fields
    return {
        **(barber.profile or {}),
        "id": barber.id,
        "name": barber.name,
        "email": barber.email,
        "specialty": barber.specialty,
        "image": barber.image,
    }


@router.post("", response_model=InsertResult, response_model_exclude_none=True)
def create_barber(
    barber: BarberCreate,
    session: Session = Depends(get_session),
):
    fields = barber.model_dump(include=set(KNOWN_FIELDS))
    profile = dict(barber.model_extra or {})
    profile.pop("id", None)

    db_barber = Barber(**fields, profile=profile)
    session.add(db_barber)
    session.commit()
    session.refresh(db_barber)

    logger.info("Created barber %s (%s)", db_barber.id, db_barber.name)
    return InsertResult(inserted_id=db_barber.id)


@router.get("", response_model=List[BarberPublic])
def list_barbers(session: Session = Depends(get_session)):
    barbers = session.exec(select(Barber).order_by(Barber.id)).all()
    return [barber_to_dict(b) for b in barbers]


@router.delete("/{barber_id}", response_model=DeleteResult)
def delete_barber(
    barber_id: int,
    session: Session = Depends(get_session),
):
    barber = session.get(Barber, barber_id)
    if barber is None:
        return DeleteResult(deleted_count=0)

    session.delete(barber)
    session.commit()

    logger.info("Deleted barber %s", barber_id)
    return DeleteResult(deleted_count=1)
