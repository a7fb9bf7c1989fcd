"""Service layer for the catalogue of offerings."""

from typing import List

from carshop_api.app.core.fixtures import FixtureStore
from carshop_api.app.schemas.offering import Offering


class OfferingService:

    @classmethod
    async def list_offerings(cls, store: FixtureStore) -> List[Offering]:
        """Return all offerings in catalogue order."""
        return list(store.offerings)
