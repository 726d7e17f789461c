"""Application entry point and composition root."""

import logging

from falcon.asgi import App

from sysroles import __version__
from sysroles.application.services.system_role_service import SystemRoleService
from sysroles.config import get_settings
from sysroles.infrastructure.auth.keycloak_provider import KeycloakProvider
from sysroles.infrastructure.persistence.postgres.connection import create_pool
from sysroles.infrastructure.persistence.postgres.unit_of_work import (
    create_uow_factory,
)
from sysroles.interfaces.api.app import create_app
from sysroles.interfaces.api.middleware.auth import AuthMiddleware
from sysroles.interfaces.api.middleware.cors import CORSMiddleware
from sysroles.interfaces.api.middleware.pool_lifespan import PoolLifespanMiddleware
from sysroles.interfaces.api.resources.health import HealthResource
from sysroles.interfaces.api.resources.system_roles import (
    SystemRoleResource,
    SystemRolesResource,
)
from sysroles.logging_config import setup_logging


def create_sysroles_app() -> App:
    """Composition root - build Falcon app with all dependencies."""
    settings = get_settings()
    setup_logging("DEBUG" if settings.debug else settings.log_level, settings.log_file)
    logging.getLogger(__name__).info(
        "Starting sysroles v%s (%s)", __version__, settings.environment
    )

    pool = create_pool(
        settings.database_url,
        min_size=settings.database_pool_min_size,
        max_size=settings.database_pool_max_size,
    )
    uow_factory = create_uow_factory(pool)

    keycloak = (
        KeycloakProvider(
            server_url=settings.keycloak_url,
            realm=settings.keycloak_realm,
            client_id=settings.keycloak_client_id,
            client_secret=settings.keycloak_client_secret,
        )
        if settings.keycloak_client_secret
        else None
    )

    service = SystemRoleService(uow_factory, logging.getLogger("sysroles.service"))
    api_logger = logging.getLogger("sysroles.api")

    return create_app(
        system_roles_resource=SystemRolesResource(service, api_logger),
        system_role_resource=SystemRoleResource(service, api_logger),
        health_resource=HealthResource(pool),
        middleware=[
            CORSMiddleware(settings.cors_origin_list),
            PoolLifespanMiddleware(pool),
            AuthMiddleware(keycloak),
        ],
    )


def main() -> None:
    """CLI entry point - run uvicorn server."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        create_sysroles_app(),
        host=settings.api_host,
        port=settings.api_port,
        log_config=None,
    )
