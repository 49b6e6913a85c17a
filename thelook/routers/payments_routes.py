# thelook/routers/payments_routes.py

import logging

import stripe
from fastapi import APIRouter, Depends, HTTPException, Request, status
from sqlmodel import Session

from thelook.db import get_session
from thelook.models import Booking, Payment
from thelook.payments import PaymentGateway
from thelook.schemas import InsertResult, PaymentCreate, PaymentIntentCreate, PaymentIntentPublic

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["payments"],
)


def get_gateway(request: Request) -> PaymentGateway:
    return request.app.state.gateway


@router.post("/create-payment-intent", response_model=PaymentIntentPublic)
def create_payment_intent(
    body: PaymentIntentCreate,
    gateway: PaymentGateway = Depends(get_gateway),
):
    try:
        payment_intent = gateway.create_payment_intent(body.price)
    except stripe.StripeError:
        logger.error("Stripe error creating payment intent", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="payment gateway error",
        )

    return PaymentIntentPublic(client_secret=payment_intent.client_secret)


@router.post("/payment", response_model=InsertResult, response_model_exclude_none=True)
def record_payment(
    payment: PaymentCreate,
    session: Session = Depends(get_session),
):
    # 1) The booking must exist before anything is written
    booking = session.get(Booking, payment.booking_id)
    if booking is None:
        raise HTTPException(status_code=404, detail="booking not found")

    # 2) Payment row and booking update share one commit
    db_payment = Payment(**payment.model_dump())
    booking.paid = True
    booking.transaction_id = payment.transaction_id

    session.add(db_payment)
    session.add(booking)
    session.commit()
    session.refresh(db_payment)

    logger.info(
        "Recorded payment %s for booking %s (transaction %s)",
        db_payment.id, booking.id, payment.transaction_id,
    )
    return InsertResult(inserted_id=db_payment.id)
