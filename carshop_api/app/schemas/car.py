"""
Pydantic models for cars.

``carType`` drives offering prices.  Cars registered through the API
start without a type; classification happens elsewhere.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class CarType(str, Enum):
    SEDAN = "SEDAN"
    HATCHBACK = "HATCHBACK"
    SUV = "SUV"


class Car(BaseModel):
    id: str
    make: str = Field(..., examples=["Honda"])
    model: str = Field(..., examples=["City"])
    year: int = Field(..., examples=[2023])
    color: str
    license_plate: str = Field(..., alias="licensePlate", examples=["MH14XY5678"])
    car_type: Optional[CarType] = Field(None, alias="carType")

    model_config = ConfigDict(populate_by_name=True, frozen=True)
