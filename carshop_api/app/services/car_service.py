"""
Service layer for car registration.

A registered car gets a fresh identifier and no ``carType``; the type
is assigned later when the car is classified.  The car is acknowledged
through the sink and returned, but it is not added to the customer's
profile.
"""

import uuid
from datetime import date
from typing import Any, List, Mapping, Optional

from carshop_api.app.core.validation import Rule, car_year_range, int_between, present, validate
from carshop_api.app.schemas.car import Car
from carshop_api.app.services.sink import AcknowledgingSink


def car_rules(today: Optional[date] = None) -> List[Rule]:
    """Validation rules for a new car, in reporting order."""
    first_year, last_year = car_year_range(today)
    return [
        Rule("make", present(), "Make is required"),
        Rule("model", present(), "Model is required"),
        Rule("year", int_between(first_year, last_year), "Please enter a valid year"),
        Rule("color", present(), "Color is required"),
        Rule("licensePlate", present(), "License plate is required"),
    ]


def new_car_id() -> str:
    return f"car-{uuid.uuid4().hex}"


class CarService:
    """Service for cars added from the profile page."""

    @classmethod
    async def register_car(
        cls,
        sink: AcknowledgingSink,
        payload: Mapping[str, Any],
        today: Optional[date] = None,
    ) -> Car:
        """Validate ``payload`` and return the new, unclassified car.

        Raises ``ValidationFailed`` listing every rejected field.
        """
        data = validate(payload, car_rules(today))
        car = Car(
            id=new_car_id(),
            make=str(data["make"]),
            model=str(data["model"]),
            year=data["year"],
            color=str(data["color"]),
            license_plate=str(data["licensePlate"]),
            car_type=None,
        )
        return sink.accept("car", car)
