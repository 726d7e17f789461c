"""System role API resources."""

import falcon.asgi

from sysroles.application.ports import Logger
from sysroles.application.services.system_role_service import SystemRoleService
from sysroles.interfaces.api.responses import (
    render_result,
    render_unauthorized,
    render_unhandled,
)

SOFT_DELETE = {"isDeleted": True}


def _one(role: dict) -> dict:
    return {"systemRole": role}


def _many(roles: list[dict]) -> dict:
    return {"totalSystemRoles": len(roles), "systemRoles": roles}


class SystemRolesResource:
    """GET/POST /system-roles - list and create system roles."""

    def __init__(self, service: SystemRoleService, logger: Logger) -> None:
        self._service = service
        self._logger = logger

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """List system roles, optionally filtered by ?isDeleted=true|false."""
        try:
            is_deleted = req.get_param_as_bool("isDeleted")
            result = await self._service.list_all(is_deleted=is_deleted)
            render_result(resp, result, self._logger, _many)
        except Exception:
            self._logger.error("ERROR @ list system roles", exc_info=True)
            render_unhandled(resp)

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Create system role from the request body."""
        try:
            actor = req.context.actor
            if actor is None:
                render_unauthorized(resp)
                return

            body = await req.get_media(default_when_empty={})
            result = await self._service.create(body, actor.actor_id)
            render_result(resp, result, self._logger, _one)
        except Exception:
            self._logger.error("ERROR @ create system role", exc_info=True)
            render_unhandled(resp)


class SystemRoleResource:
    """GET/PATCH/PUT/DELETE /system-roles/{system_role_id}."""

    def __init__(self, service: SystemRoleService, logger: Logger) -> None:
        self._service = service
        self._logger = logger

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        system_role_id: str,
    ) -> None:
        """Get system role by id."""
        try:
            result = await self._service.find_by_id(system_role_id)
            render_result(resp, result, self._logger, _one)
        except Exception:
            self._logger.error("ERROR @ fetch system role %s", system_role_id, exc_info=True)
            render_unhandled(resp)

    async def on_patch(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        system_role_id: str,
    ) -> None:
        """Partially update system role; {"isDeleted": false} restores a deleted one."""
        try:
            actor = req.context.actor
            if actor is None:
                render_unauthorized(resp)
                return

            body = await req.get_media(default_when_empty={})
            result = await self._service.update_by_id(system_role_id, body, actor.actor_id)
            render_result(resp, result, self._logger, _one)
        except Exception:
            self._logger.error("ERROR @ update system role %s", system_role_id, exc_info=True)
            render_unhandled(resp)

    on_put = on_patch

    async def on_delete(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        system_role_id: str,
    ) -> None:
        """Soft delete: sets isDeleted, the record stays readable."""
        try:
            actor = req.context.actor
            if actor is None:
                render_unauthorized(resp)
                return

            result = await self._service.update_by_id(system_role_id, SOFT_DELETE, actor.actor_id)
            render_result(resp, result, self._logger, lambda _: {"systemRole": system_role_id})
        except Exception:
            self._logger.error("ERROR @ delete system role %s", system_role_id, exc_info=True)
            render_unhandled(resp)
