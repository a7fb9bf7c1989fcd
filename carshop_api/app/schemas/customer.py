"""Pydantic model for customer profiles."""

from typing import List

from pydantic import BaseModel, ConfigDict, Field

from .car import Car


class Customer(BaseModel):
    """A customer profile with the cars it owns.

    Cars are embedded by value; a profile is a snapshot, not a join.
    """

    id: str
    name: str
    email: str
    phone: str
    address: str
    cars: List[Car] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)
