# thelook/models.py

from typing import Optional, List
from datetime import date as Date

from sqlalchemy.types import JSON
from sqlmodel import SQLModel, Field, Column


class Service(SQLModel, table=True):
    __tablename__ = "services"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(index=True)
    price: float = 0
    slots: List[str] = Field(default_factory=list, sa_column=Column(JSON))


class Booking(SQLModel, table=True):
    # (date, email, service_name) is deduplicated by the handler, not the table
    __tablename__ = "booking"

    id: Optional[int] = Field(default=None, primary_key=True)

    date: Date = Field(index=True)
    email: str = Field(index=True)
    service_name: str
    slot: str
    price: Optional[float] = None
    customer_name: Optional[str] = None
    phone: Optional[str] = None
    paid: bool = False
    transaction_id: Optional[str] = None


class User(SQLModel, table=True):
    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True)
    email: str = Field(index=True)
    name: Optional[str] = None
    role: Optional[str] = None  # "admin" or unset


class Barber(SQLModel, table=True):
    __tablename__ = "barber"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    email: Optional[str] = None
    specialty: Optional[str] = None
    image: Optional[str] = None
    profile: dict = Field(default_factory=dict, sa_column=Column(JSON))


class Payment(SQLModel, table=True):
    __tablename__ = "payment"

    id: Optional[int] = Field(default=None, primary_key=True)

    booking_id: int = Field(index=True)
    transaction_id: str
    email: Optional[str] = None
    price: Optional[float] = None
