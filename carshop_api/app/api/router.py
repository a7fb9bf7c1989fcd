"""
Top‑level API router.

Aggregates the domain routers under a single router that the
application mounts at ``/api``.  When new endpoints are added, update
this file and ``ENDPOINTS`` so the index and startup banner stay in
sync.
"""

from fastapi import APIRouter

from .endpoints import appointments, offerings, profile


router = APIRouter()

router.include_router(profile.router, prefix="/profile", tags=["profile"])
router.include_router(offerings.router, prefix="/offerings", tags=["offerings"])
router.include_router(appointments.router, prefix="/appointments", tags=["appointments"])


# (method, path, auth requirement) for every endpoint under /api.
ENDPOINTS = [
    ("GET", "/api/profile", "x-user-email of a customer"),
    ("GET", "/api/profile/appointments", "x-user-email of any user"),
    ("GET", "/api/offerings", "x-user-email of any user"),
    ("POST", "/api/profile/cars", "x-user-email of any user; validates body"),
    ("POST", "/api/appointments", "x-user-email of any user; validates body"),
]
