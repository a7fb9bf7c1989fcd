"""
Service layer for customer profiles.

Profiles are read straight from the fixture store.  Only customers
have a profile; the role check itself happens in the endpoint through
``require_roles``.
"""

import logging
from typing import List

from carshop_api.app.core.errors import NotFound
from carshop_api.app.core.fixtures import FixtureStore
from carshop_api.app.schemas.appointment import Appointment
from carshop_api.app.schemas.customer import Customer
from carshop_api.app.schemas.user import User


logger = logging.getLogger(__name__)


class ProfileService:
    """Service for the signed‑in customer's profile."""

    @classmethod
    async def get_profile(cls, store: FixtureStore, user: User) -> Customer:
        """Return the customer record behind ``user.profile_id``.

        Raises ``NotFound`` if the profile does not exist.
        """
        customer = store.get_customer(user.profile_id)
        if customer is None:
            logger.info("No customer profile %s for %s", user.profile_id, user.email)
            raise NotFound("Customer profile not found.")
        return customer

    @classmethod
    async def list_appointments(cls, store: FixtureStore, user: User) -> List[Appointment]:
        """Return the appointments visible on the profile page.

        Every appointment in the store is returned, whoever the caller
        is.  The demo front‑end relies on seeing the sample booking
        regardless of the signed‑in user.
        """
        return list(store.appointments)
