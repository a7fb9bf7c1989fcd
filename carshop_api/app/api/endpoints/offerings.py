"""Offering catalogue endpoint."""

from typing import List

from fastapi import APIRouter, Depends

from carshop_api.app.core.fixtures import FixtureStore, get_store
from carshop_api.app.core.security import get_current_user
from carshop_api.app.schemas.offering import Offering
from carshop_api.app.schemas.user import User
from carshop_api.app.services.offering_service import OfferingService


router = APIRouter()


@router.get("", response_model=List[Offering])
async def list_offerings(
    current_user: User = Depends(get_current_user),
    store: FixtureStore = Depends(get_store),
) -> List[Offering]:
    """Return every offering, for any signed‑in role."""
    return await OfferingService.list_offerings(store)
