"""
Tests for the in-memory fixture store
"""

from datetime import datetime, timedelta, timezone

import pytest

from carshop_api.app.core.fixtures import FixtureStore, build_fixture_store
from carshop_api.app.schemas.car import CarType
from carshop_api.app.schemas.user import Role


class TestFixtureStore:
    """Test cases for the demo data set"""

    def setup_method(self):
        self.now = datetime(2030, 1, 1, 8, 0, tzinfo=timezone.utc)
        self.store = build_fixture_store(now=self.now)

    def test_users_keyed_by_email(self):
        assert set(self.store.users) == {"customer@carshop.com", "employee@carshop.com", "owner@carshop.com"}
        assert self.store.get_user("owner@carshop.com").role == Role.OWNER

    def test_get_user_missing(self):
        assert self.store.get_user(None) is None
        assert self.store.get_user("") is None
        assert self.store.get_user("nobody@carshop.com") is None

    def test_customer_profile_resolves(self):
        user = self.store.get_user("customer@carshop.com")
        customer = self.store.get_customer(user.profile_id)
        assert customer.id == "cust-1"
        assert [car.id for car in customer.cars] == ["car-1", "car-2"]

    def test_staff_profiles_do_not_resolve(self):
        assert self.store.get_customer("emp-1") is None
        assert self.store.get_customer("owner-1") is None

    def test_offerings_in_order(self):
        assert [o.id for o in self.store.offerings] == ["offering-1", "offering-2", "offering-3"]
        assert self.store.offerings[0].prices[CarType.SEDAN] == 350

    def test_sample_appointment_three_days_out(self):
        (appointment,) = self.store.appointments
        assert appointment.scheduled_time == self.now + timedelta(days=3)
        assert appointment.customer.id == "cust-1"
        assert appointment.car.id == "car-1"
        assert appointment.offering.id == "offering-1"

    def test_store_is_read_only(self):
        with pytest.raises(TypeError):
            self.store.users["x@carshop.com"] = self.store.get_user("owner@carshop.com")
        with pytest.raises(Exception):
            self.store.cars["car-1"].make = "Tata"

    def test_from_records_defaults_empty(self):
        empty = FixtureStore.from_records()
        assert len(empty.users) == 0
        assert empty.offerings == ()
