"""
Pydantic models for appointments.

Appointments embed the customer, car and offering they refer to.  The
booking endpoint only acknowledges new appointments, so the create side
has no read model; clients receive a :class:`MessageResponse`.
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from .car import Car
from .customer import Customer
from .offering import Offering


class AppointmentStatus(str, Enum):
    SCHEDULED = "SCHEDULED"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


class Appointment(BaseModel):
    id: str
    scheduled_time: datetime = Field(..., alias="scheduledTime")
    status: AppointmentStatus = AppointmentStatus.SCHEDULED
    total_cost: int = Field(..., alias="totalCost", ge=0)
    customer: Customer
    car: Car
    offering: Offering

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class MessageResponse(BaseModel):
    """Plain acknowledgement body."""

    message: str
