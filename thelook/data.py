# thelook/data.py

import logging

from sqlalchemy.engine import Engine
from sqlmodel import Session, select

from .models import Service

logger = logging.getLogger(__name__)

DEFAULT_SLOTS = [
    "08.00 AM - 08.30 AM",
    "08.30 AM - 09.00 AM",
    "09.00 AM - 09.30 AM",
    "09.30 AM - 10.00 AM",
    "10.00 AM - 10.30 AM",
    "10.30 AM - 11.00 AM",
    "11.00 AM - 11.30 AM",
    "11.30 AM - 12.00 PM",
    "12.00 PM - 12.30 PM",
    "12.30 PM - 01.00 PM",
    "01.00 PM - 01.30 PM",
    "01.30 PM - 02.00 PM",
    "02.00 PM - 02.30 PM",
    "02.30 PM - 03.00 PM",
    "03.00 PM - 03.30 PM",
    "03.30 PM - 04.00 PM",
    "04.00 PM - 04.30 PM",
    "04.30 PM - 05.00 PM",
]

# name -> price in dollars
SERVICES = {
    "Haircut": 18,
    "Fade": 22,
    "Beard Trim": 15,
    "Hot Towel Shave": 25,
    "Haircut + Beard": 35,
    "Kids Cut": 12,
}


def seed_services(engine: Engine) -> int:
    """Insert the default catalog when the services table is empty."""
    with Session(engine) as session:
        if session.exec(select(Service)).first() is not None:
            return 0

        for name, price in SERVICES.items():
            session.add(Service(name=name, price=price, slots=list(DEFAULT_SLOTS)))
        session.commit()

    logger.info("Seeded %d services", len(SERVICES))
    return len(SERVICES)
