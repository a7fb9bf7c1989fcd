"""
Service layer for booking appointments.

Bookings are validated, checked against the shop's one scheduling
rule and acknowledged.  Nothing is added to the appointment list.

The scheduling rule: the Premium Wash (``offering-1``) is fully booked
from 10:00 to 12:59 server‑local time every day.  Requests for that
offering starting in those hours are refused with a conflict message.
"""

import logging
from datetime import datetime
from typing import Any, Dict, List, Mapping

from carshop_api.app.core.errors import BusinessRuleConflict
from carshop_api.app.core.validation import Rule, iso_datetime, parse_iso_datetime, present, validate
from carshop_api.app.services.sink import AcknowledgingSink


logger = logging.getLogger(__name__)

PREMIUM_WASH_ID = "offering-1"
# Inclusive hour window during which the Premium Wash is unavailable.
BUSY_HOURS = (10, 12)

SLOT_UNAVAILABLE_MESSAGE = "The selected time slot is unavailable. Please choose another time."
BOOKED_MESSAGE = "Appointment booked successfully!"

APPOINTMENT_RULES: List[Rule] = [
    Rule("carId", present(), "Car selection is required"),
    Rule("offeringId", present(), "Service selection is required"),
    Rule("scheduledTime", iso_datetime(), "A valid date and time is required"),
]


def local_hour(moment: datetime) -> int:
    """Hour of day in the server's time zone.

    Naive values are already local; aware values are converted.
    """
    if moment.tzinfo is None:
        return moment.hour
    return moment.astimezone().hour


def is_slot_unavailable(offering_id: str, scheduled_time: datetime) -> bool:
    if offering_id != PREMIUM_WASH_ID:
        return False
    start, end = BUSY_HOURS
    return start <= local_hour(scheduled_time) <= end


class AppointmentService:
    """Service for appointment bookings."""

    @classmethod
    async def book_appointment(cls, sink: AcknowledgingSink, payload: Mapping[str, Any]) -> Dict[str, Any]:
        """Validate and acknowledge a booking request.

        Returns the acknowledged booking request.  Raises
        ``ValidationFailed`` for missing or malformed fields and
        ``BusinessRuleConflict`` when the slot is taken.
        """
        data = validate(payload, APPOINTMENT_RULES)
        scheduled_time = parse_iso_datetime(data["scheduledTime"])
        if is_slot_unavailable(data["offeringId"], scheduled_time):
            logger.info("Slot %s unavailable for %s", data["scheduledTime"], data["offeringId"])
            raise BusinessRuleConflict(SLOT_UNAVAILABLE_MESSAGE)
        return sink.accept("appointment", data)
