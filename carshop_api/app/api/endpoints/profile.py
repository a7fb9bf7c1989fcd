"""
Profile endpoints.

These routes serve the signed‑in customer's profile page: the profile
itself, the appointment list and car registration.  The profile is
restricted to customers; the other two accept any known user.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends, status

from carshop_api.app.core.fixtures import FixtureStore, get_store
from carshop_api.app.core.security import get_current_user, require_roles
from carshop_api.app.core.validation import json_body
from carshop_api.app.schemas.appointment import Appointment
from carshop_api.app.schemas.car import Car
from carshop_api.app.schemas.customer import Customer
from carshop_api.app.schemas.user import Role, User
from carshop_api.app.services.car_service import CarService
from carshop_api.app.services.profile_service import ProfileService
from carshop_api.app.services.sink import AcknowledgingSink, get_sink


router = APIRouter()

customers_only = require_roles(Role.CUSTOMER, message="Forbidden: Only customers can access this profile.")


@router.get("", response_model=Customer)
async def get_profile(
    current_user: User = Depends(customers_only),
    store: FixtureStore = Depends(get_store),
) -> Customer:
    """Return the customer profile of the caller.

    Only customers have a profile (403 otherwise).  Returns 404 when
    the caller's profile id does not resolve to a customer.
    """
    return await ProfileService.get_profile(store, current_user)


@router.get("/appointments", response_model=List[Appointment])
async def list_profile_appointments(
    current_user: User = Depends(get_current_user),
    store: FixtureStore = Depends(get_store),
) -> List[Appointment]:
    """Return the appointments shown on the profile page."""
    return await ProfileService.list_appointments(store, current_user)


@router.post("/cars", response_model=Car, status_code=status.HTTP_201_CREATED)
async def add_car(
    current_user: User = Depends(get_current_user),
    payload: Dict[str, Any] = Depends(json_body),
    sink: AcknowledgingSink = Depends(get_sink),
) -> Car:
    """Register a car.

    Expects ``make``, ``model``, ``year``, ``color`` and
    ``licensePlate``.  Responds 400 with an ``errors`` list naming every
    invalid field, or 201 with the new car (``carType`` is ``null``).
    The car is not added to the profile.
    """
    return await CarService.register_car(sink, payload)
