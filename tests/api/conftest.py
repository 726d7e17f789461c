"""Fixtures for API tests."""

import logging

import pytest
from falcon.testing import TestClient

from sysroles.application.services.system_role_service import SystemRoleService
from sysroles.interfaces.api.app import create_app
from sysroles.interfaces.api.middleware.auth import Actor
from sysroles.interfaces.api.resources.health import HealthResource
from sysroles.interfaces.api.resources.system_roles import (
    SystemRoleResource,
    SystemRolesResource,
)

API_LOGGER = "tests.sysroles.api"


class AuthBypassMiddleware:
    """Middleware that sets context.actor for testing."""

    def __init__(self, actor: Actor | None = Actor(actor_id="test-user-1")) -> None:
        self._actor = actor

    async def process_request(self, req, resp):
        req.context.actor = self._actor


def build_app(service, actor: Actor | None = Actor(actor_id="test-user-1")):
    """Falcon ASGI app around the given service, as the composition root wires it."""
    logger = logging.getLogger(API_LOGGER)
    return create_app(
        system_roles_resource=SystemRolesResource(service, logger),
        system_role_resource=SystemRoleResource(service, logger),
        health_resource=HealthResource(),
        middleware=[AuthBypassMiddleware(actor)],
    )


@pytest.fixture
def app(uow_factory, mock_logger):
    """App backed by the in-memory unit of work."""
    return build_app(SystemRoleService(uow_factory, mock_logger))


@pytest.fixture
def client(app) -> TestClient:
    """Falcon ASGI test client."""
    return TestClient(app)


@pytest.fixture
def broken_client(broken_service) -> TestClient:
    """Client whose storage fails on every call."""
    return TestClient(build_app(broken_service))


@pytest.fixture
def unauthenticated_client(service) -> TestClient:
    """Client whose auth middleware rejected the token."""
    return TestClient(build_app(service, actor=None))


@pytest.fixture
def make_client():
    """Build a client around an arbitrary service, e.g. an AsyncMock."""

    def _make(service, actor: Actor | None = Actor(actor_id="test-user-1")) -> TestClient:
        return TestClient(build_app(service, actor))

    return _make
