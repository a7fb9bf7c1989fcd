"""
Access gate for the mock API.

There is no real authentication.  A client asserts who it is by
sending the user's email in the ``x-user-email`` header and the
:class:`HeaderIdentityResolver` looks that email up in the fixture
users.  Nothing is signed and nothing expires; the header is trusted
as‑is.

Resolution is pluggable: any object with a ``resolve(request)`` method
returning a :class:`User` (or ``None``) can be attached to
``app.state.identity_resolver``.  A token or session based resolver
can therefore replace the header lookup without touching the
endpoints, which only depend on :func:`get_current_user` and
:func:`require_roles`.
"""

import logging
from typing import Callable, Mapping, Optional, Protocol

from fastapi import Depends, Request

from carshop_api.app.core.errors import Forbidden, Unauthenticated
from carshop_api.app.schemas.user import Role, User


logger = logging.getLogger(__name__)

IDENTITY_HEADER = "x-user-email"

UNAUTHENTICATED_MESSAGE = "Unauthorized: Please provide a valid 'x-user-email' header."


class IdentityResolver(Protocol):
    def resolve(self, request: Request) -> Optional[User]:
        ...


class HeaderIdentityResolver:
    """Resolve the caller from a bare email in a request header."""

    def __init__(self, users: Mapping[str, User], header: str = IDENTITY_HEADER) -> None:
        self._users = users
        self.header = header

    def resolve(self, request: Request) -> Optional[User]:
        email = request.headers.get(self.header)
        if not email:
            return None
        return self._users.get(email)


def get_identity_resolver(request: Request) -> IdentityResolver:
    return request.app.state.identity_resolver


def get_current_user(
    request: Request,
    resolver: IdentityResolver = Depends(get_identity_resolver),
) -> User:
    """Dependency that returns the identity of the caller.

    Raises ``Unauthenticated`` (HTTP 401) when the resolver does not
    recognise the request; the endpoint is never invoked in that case.
    """
    user = resolver.resolve(request)
    if user is None:
        logger.warning("Rejected unauthenticated request to %s %s", request.method, request.url.path)
        raise Unauthenticated(UNAUTHENTICATED_MESSAGE)
    request.state.user = user
    return user


def require_roles(*roles: Role, message: str = "Forbidden: Insufficient permissions.") -> Callable[..., User]:
    """Dependency factory restricting an endpoint to the given roles.

    Use it via ``Depends(require_roles(Role.CUSTOMER))``.  The gate runs
    first, so unknown callers still get a 401; known callers with any
    other role get a 403 carrying ``message``.
    """

    def _role_dependency(current_user: User = Depends(get_current_user)) -> User:
        if current_user.role not in roles:
            raise Forbidden(message)
        return current_user

    return _role_dependency
