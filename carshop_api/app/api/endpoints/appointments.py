"""
Appointment booking endpoint.

Accepts ``carId``, ``offeringId`` and an ISO‑8601 ``scheduledTime``.
Invalid fields produce 400 with an ``errors`` list; a request for a
fully booked slot produces 400 with a ``message``.  Successful
bookings are acknowledged but not added to the appointment list.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends, status

from carshop_api.app.core.security import get_current_user
from carshop_api.app.core.validation import json_body
from carshop_api.app.schemas.appointment import MessageResponse
from carshop_api.app.schemas.user import User
from carshop_api.app.services.appointment_service import BOOKED_MESSAGE, AppointmentService
from carshop_api.app.services.sink import AcknowledgingSink, get_sink


router = APIRouter()


@router.post("", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def create_appointment(
    current_user: User = Depends(get_current_user),
    payload: Dict[str, Any] = Depends(json_body),
    sink: AcknowledgingSink = Depends(get_sink),
) -> MessageResponse:
    await AppointmentService.book_appointment(sink, payload)
    return MessageResponse(message=BOOKED_MESSAGE)
