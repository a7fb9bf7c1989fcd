"""
Pydantic model for service offerings.

An offering is a purchasable service (wash, coating, film) with a
price per car type.
"""

from typing import Dict

from pydantic import BaseModel, ConfigDict, Field

from .car import CarType


class Offering(BaseModel):
    id: str
    name: str = Field(..., examples=["Premium Wash"])
    description: str
    duration_mins: int = Field(..., alias="durationMins", ge=0, description="Expected duration in minutes")
    prices: Dict[CarType, int] = Field(default_factory=dict, description="Price keyed by car type")

    model_config = ConfigDict(populate_by_name=True, frozen=True)
