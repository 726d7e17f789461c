"""Falcon ASGI application."""

import logging

import falcon.asgi
from falcon.asgi import App

from sysroles.interfaces.api.resources.health import HealthResource
from sysroles.interfaces.api.resources.system_roles import (
    SystemRoleResource,
    SystemRolesResource,
)
from sysroles.interfaces.api.responses import render_unhandled

logger = logging.getLogger("sysroles.api")


async def handle_uncaught(
    req: falcon.asgi.Request, resp: falcon.asgi.Response, ex: Exception, params: dict
) -> None:
    """Last-resort handler for exceptions escaping a resource or middleware.

    falcon.HTTPError keeps its own, more specific, default handler.
    """
    logger.error("Unhandled exception on %s %s", req.method, req.path, exc_info=ex)
    render_unhandled(resp)


def create_app(
    system_roles_resource: SystemRolesResource,
    system_role_resource: SystemRoleResource,
    health_resource: HealthResource,
    middleware: list | None = None,
) -> App:
    """Create Falcon ASGI app with routes."""
    app = falcon.asgi.App(middleware=middleware or [])
    app.add_error_handler(Exception, handle_uncaught)
    app.add_route("/health", health_resource)
    app.add_route("/health/ready", health_resource, suffix="ready")
    app.add_route("/system-roles", system_roles_resource)
    app.add_route("/system-roles/{system_role_id}", system_role_resource)
    return app
