"""
Pydantic models for users.

A user is the identity attached to a request once the access gate has
resolved the ``x-user-email`` header.  Users are fixture data and are
never created through the API.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Role(str, Enum):
    CUSTOMER = "CUSTOMER"
    EMPLOYEE = "EMPLOYEE"
    OWNER = "OWNER"


class User(BaseModel):
    """Schema for a known user of the shop."""

    id: str
    name: str
    email: str = Field(..., examples=["customer@carshop.com"])
    role: Role
    # Points at a Customer record for customers.  Employees and owners
    # carry identifiers of profiles this API does not serve.
    profile_id: str = Field(..., alias="profileId")

    model_config = ConfigDict(populate_by_name=True, frozen=True)
