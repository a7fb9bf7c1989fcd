"""
Tests for the access gate
"""

from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient

from carshop_api.app.core.errors import register_exception_handlers
from carshop_api.app.core.fixtures import build_fixture_store
from carshop_api.app.core.security import HeaderIdentityResolver, get_current_user, require_roles
from carshop_api.app.schemas.user import Role, User
from carshop_api.app.main import create_app


class FixedResolver:
    """Resolver that always returns the same user"""

    def __init__(self, user):
        self.user = user

    def resolve(self, request):
        return self.user


def build_gate_app(resolver):
    app = FastAPI()
    app.state.identity_resolver = resolver
    register_exception_handlers(app)

    @app.get("/whoami")
    async def whoami(user: User = Depends(get_current_user)):
        return {"id": user.id}

    @app.get("/staff")
    async def staff(user: User = Depends(require_roles(Role.EMPLOYEE, Role.OWNER))):
        return {"id": user.id}

    return app


class TestHeaderIdentityResolver:
    """Test cases for the header lookup"""

    def setup_method(self):
        self.store = build_fixture_store()
        self.client = TestClient(build_gate_app(HeaderIdentityResolver(self.store.users)))

    def test_known_email(self):
        response = self.client.get("/whoami", headers={"x-user-email": "employee@carshop.com"})
        assert response.status_code == 200
        assert response.json() == {"id": "user-2"}

    def test_missing_header(self):
        response = self.client.get("/whoami")
        assert response.status_code == 401
        assert response.json() == {"message": "Unauthorized: Please provide a valid 'x-user-email' header."}

    def test_unknown_email(self):
        response = self.client.get("/whoami", headers={"x-user-email": "stranger@carshop.com"})
        assert response.status_code == 401

    def test_email_is_case_sensitive(self):
        response = self.client.get("/whoami", headers={"x-user-email": "Customer@CarShop.com"})
        assert response.status_code == 401

    def test_require_roles_allows_listed(self):
        response = self.client.get("/staff", headers={"x-user-email": "owner@carshop.com"})
        assert response.status_code == 200

    def test_require_roles_rejects_others(self):
        response = self.client.get("/staff", headers={"x-user-email": "customer@carshop.com"})
        assert response.status_code == 403
        assert "message" in response.json()

    def test_require_roles_still_authenticates(self):
        response = self.client.get("/staff")
        assert response.status_code == 401


class TestPluggableResolver:
    """Test cases for replacing the identity strategy"""

    def test_custom_resolver_drives_endpoints(self):
        store = build_fixture_store()
        owner = store.get_user("owner@carshop.com")
        client = TestClient(create_app(store=store, identity_resolver=FixedResolver(owner)))

        # No header needed, the resolver decides.
        assert client.get("/api/offerings").status_code == 200
        assert client.get("/api/profile").status_code == 403

    def test_resolver_returning_none_is_unauthenticated(self):
        client = TestClient(create_app(identity_resolver=FixedResolver(None)))
        response = client.get("/api/offerings", headers={"x-user-email": "customer@carshop.com"})
        assert response.status_code == 401
