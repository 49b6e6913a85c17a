# thelook/schemas.py

from datetime import date as Date
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    # JSON bodies use camelCase (serviceName, transactionId, ...)
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# Write acknowledgments

class InsertResult(WireModel):
    acknowledged: bool = True
    inserted_id: Optional[int] = None
    message: Optional[str] = None


class UpdateResult(WireModel):
    acknowledged: bool = True
    matched_count: int = 0
    modified_count: int = 0


class DeleteResult(WireModel):
    acknowledged: bool = True
    deleted_count: int = 0


# Services

class ServicePublic(WireModel):
    id: int
    name: str
    price: float
    slots: List[str]


class ServiceSpecialty(WireModel):
    id: int
    name: str


# Bookings

class BookingCreate(WireModel):
    date: Date
    email: str = Field(min_length=3)
    service_name: str = Field(min_length=1)
    slot: str = Field(min_length=1)
    price: Optional[float] = Field(default=None, ge=0)
    customer_name: Optional[str] = None
    phone: Optional[str] = None


class BookingPublic(WireModel):
    id: int
    date: Date
    email: str
    service_name: str
    slot: str
    price: Optional[float] = None
    customer_name: Optional[str] = None
    phone: Optional[str] = None
    paid: bool = False
    transaction_id: Optional[str] = None


# Users

class UserCreate(WireModel):
    email: str = Field(min_length=3)
    name: Optional[str] = None


class UserPublic(WireModel):
    id: int
    email: str
    name: Optional[str] = None
    role: Optional[str] = None


class AdminStatus(WireModel):
    is_admin: bool


class Token(WireModel):
    access_token: str


# Barbers

class BarberCreate(WireModel):
    # anything beyond the known fields is kept as profile data
    model_config = ConfigDict(extra="allow")

    name: str = Field(min_length=1)
    email: Optional[str] = None
    specialty: Optional[str] = None
    image: Optional[str] = None


class BarberPublic(WireModel):
    model_config = ConfigDict(extra="allow")

    id: int
    name: str
    email: Optional[str] = None
    specialty: Optional[str] = None
    image: Optional[str] = None


# Payments

class PaymentIntentCreate(WireModel):
    price: float = Field(gt=0)


class PaymentIntentPublic(WireModel):
    client_secret: str


class PaymentCreate(WireModel):
    booking_id: int
    transaction_id: str = Field(min_length=1)
    email: Optional[str] = None
    price: Optional[float] = Field(default=None, ge=0)
