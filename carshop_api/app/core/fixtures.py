"""
In‑memory fixture store.

The mock API has no database.  All data lives in a :class:`FixtureStore`
built once per application by :func:`build_fixture_store` and attached
to ``app.state.store``.  Handlers receive it through the
:func:`get_store` dependency, so tests can build an application around
a store of their own.

The store is read‑only: mappings are wrapped in ``MappingProxyType``,
sequences are tuples and every record is a frozen pydantic model.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Tuple

from fastapi import Request

from carshop_api.app.schemas.appointment import Appointment, AppointmentStatus
from carshop_api.app.schemas.car import Car, CarType
from carshop_api.app.schemas.customer import Customer
from carshop_api.app.schemas.offering import Offering
from carshop_api.app.schemas.user import Role, User


@dataclass(frozen=True)
class FixtureStore:
    """Static data set for the lifetime of one application instance."""

    users: Mapping[str, User]
    cars: Mapping[str, Car]
    customers: Mapping[str, Customer]
    offerings: Tuple[Offering, ...]
    appointments: Tuple[Appointment, ...]

    @classmethod
    def from_records(
        cls,
        users: Iterable[User] = (),
        cars: Iterable[Car] = (),
        customers: Iterable[Customer] = (),
        offerings: Iterable[Offering] = (),
        appointments: Iterable[Appointment] = (),
    ) -> "FixtureStore":
        """Build a store from plain records, keying users by email and
        cars/customers by id."""
        return cls(
            users=MappingProxyType({u.email: u for u in users}),
            cars=MappingProxyType({c.id: c for c in cars}),
            customers=MappingProxyType({c.id: c for c in customers}),
            offerings=tuple(offerings),
            appointments=tuple(appointments),
        )

    def get_user(self, email: Optional[str]) -> Optional[User]:
        if not email:
            return None
        return self.users.get(email)

    def get_customer(self, customer_id: str) -> Optional[Customer]:
        return self.customers.get(customer_id)


def build_fixture_store(now: Optional[datetime] = None) -> FixtureStore:
    """Create the demo data set.

    ``now`` anchors the scheduled time of the sample appointment (three
    days later).  It defaults to the current UTC time.
    """
    now = now or datetime.now(timezone.utc)

    users = [
        User(id="user-1", name="John Customer", email="customer@carshop.com", role=Role.CUSTOMER, profile_id="cust-1"),
        User(id="user-2", name="Jane Doe", email="employee@carshop.com", role=Role.EMPLOYEE, profile_id="emp-1"),
        User(id="user-3", name="Shop Owner", email="owner@carshop.com", role=Role.OWNER, profile_id="owner-1"),
    ]

    city = Car(
        id="car-1", make="Honda", model="City", year=2023, color="White",
        license_plate="MH14XY5678", car_type=CarType.SEDAN,
    )
    swift = Car(
        id="car-2", make="Maruti", model="Swift", year=2022, color="Red",
        license_plate="MH12AB1234", car_type=CarType.HATCHBACK,
    )

    john = Customer(
        id="cust-1",
        name="John Customer",
        email="customer@carshop.com",
        phone="9876543210",
        address="123 Main St, Pune",
        cars=[city, swift],
    )

    offerings = [
        Offering(
            id="offering-1",
            name="Premium Wash",
            description="Full exterior and interior cleaning.",
            duration_mins=45,
            prices={CarType.HATCHBACK: 300, CarType.SEDAN: 350, CarType.SUV: 400},
        ),
        Offering(
            id="offering-2",
            name="Ceramic Coating (3 Year)",
            description="Full body ceramic coating.",
            duration_mins=2880,
            prices={CarType.HATCHBACK: 20000, CarType.SEDAN: 25000, CarType.SUV: 30000},
        ),
        Offering(
            id="offering-3",
            name="PPF - Full Front",
            description="Paint Protection Film.",
            duration_mins=600,
            prices={CarType.HATCHBACK: 35000, CarType.SEDAN: 40000, CarType.SUV: 45000},
        ),
    ]

    appointments = [
        Appointment(
            id="appt-1",
            scheduled_time=now + timedelta(days=3),
            status=AppointmentStatus.SCHEDULED,
            total_cost=350,
            customer=john,
            car=city,
            offering=offerings[0],
        )
    ]

    return FixtureStore.from_records(
        users=users,
        cars=[city, swift],
        customers=[john],
        offerings=offerings,
        appointments=appointments,
    )


def get_store(request: Request) -> FixtureStore:
    """FastAPI dependency returning the store attached to the application."""
    return request.app.state.store
